"""
Version Check Service - Invalid Request Error Exception

Exception raised when the request body lacks a usable version.
"""

from .version_check_error import VersionCheckError


class InvalidRequestError(VersionCheckError):
    """Exception for invalid request input."""
    pass
