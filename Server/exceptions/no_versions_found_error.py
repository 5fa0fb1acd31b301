"""
Version Check Service - No Versions Found Exception

Exception raised when a repository has neither releases nor tags.
"""

from .version_check_error import VersionCheckError


class NoVersionsFoundError(VersionCheckError):
    """Exception for repositories without any release or tag."""
    pass
