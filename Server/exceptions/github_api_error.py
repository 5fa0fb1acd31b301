"""
Version Check Service - GitHub API Error Exception

Exception raised when GitHub answers with an unexpected status code.
"""

from typing import Optional

from .version_check_error import VersionCheckError


class GitHubAPIError(VersionCheckError):
    """Exception for non-success responses from the GitHub API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
