"""
Version Check Service - Status Endpoints

This module contains the health check endpoint.
"""

from datetime import datetime, timezone
from fastapi import APIRouter

from models.api import HealthResponse
from service_info import SERVICE_NAME, SERVICE_VERSION


# Create router instance
router = APIRouter()


# ==================== Health Check Endpoint ====================

@router.get("/health", response_model=HealthResponse, tags=["Status"])
async def health_check():
    """
    Health check endpoint to verify server is running

    Does not contact GitHub.

    Returns:
        HealthResponse: Server status information
    """
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        timestamp_utc=datetime.now(timezone.utc).isoformat()
    )
