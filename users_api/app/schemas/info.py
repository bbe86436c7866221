"""Pydantic models for the service metadata and health endpoints."""

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    message: str
    version: str
    framework: str


class HealthStatus(BaseModel):
    status: str = Field("healthy", examples=["healthy"])
    timestamp: str = Field(..., description="Current time, ISO-8601 in UTC")
    uptime: float = Field(..., description="Seconds since the process started")
