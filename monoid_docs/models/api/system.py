"""System and monitoring related API models."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    database_connected: bool


__all__ = ["HealthResponse"]
