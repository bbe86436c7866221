"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, middleware, error
envelope), ``api`` (routers and endpoints), ``schemas`` (request and
response models) and ``services`` (the in‑memory user store).
"""

from .main import app, create_app  # noqa: F401
