"""
Version Check Service - API Models Package

This package contains Pydantic models for all API endpoints.
"""

from models.api.version_check import (
    VersionCheckResponse,
    ReleaseVersionCheckResponse,
    TagVersionCheckResponse,
    LatestVersionResponse,
    FailureResponse
)
from models.api.health import HealthResponse

__all__ = [
    'VersionCheckResponse',
    'ReleaseVersionCheckResponse',
    'TagVersionCheckResponse',
    'LatestVersionResponse',
    'FailureResponse',
    'HealthResponse',
]
