"""Configuration, logging, middleware and request/response plumbing."""
