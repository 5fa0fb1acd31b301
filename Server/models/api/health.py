"""
Version Check Service - Health API Model
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for the health check endpoint"""
    status: str
    service: str
    version: str
    timestamp_utc: str
