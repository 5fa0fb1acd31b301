"""
Version Check Service - Exceptions Package

Contains all exception classes raised while checking a version.
"""

from .version_check_error import VersionCheckError
from .configuration_error import ConfigurationError
from .invalid_request_error import InvalidRequestError
from .github_api_error import GitHubAPIError
from .no_versions_found_error import NoVersionsFoundError

__all__ = [
    'VersionCheckError',
    'ConfigurationError',
    'InvalidRequestError',
    'GitHubAPIError',
    'NoVersionsFoundError'
]
