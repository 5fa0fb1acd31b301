"""
Version Check Service - Configuration Error Exception

Exception raised when the repository to check is not configured.
"""

from .version_check_error import VersionCheckError


class ConfigurationError(VersionCheckError):
    """Exception for missing or invalid service configuration."""
    pass
