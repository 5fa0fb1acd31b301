"""
Version Check Service - Infrastructure Models Package

This package contains dataclass models for configuration and for the
intermediate results of a version check.
"""

from models.infrastructure.service_config import ServiceConfig
from models.infrastructure.latest_version import LatestRelease, LatestTag, LatestVersionInfo
from models.infrastructure.version_check_result import VersionCheckResult

__all__ = [
    'ServiceConfig',
    'LatestRelease',
    'LatestTag',
    'LatestVersionInfo',
    'VersionCheckResult',
]
