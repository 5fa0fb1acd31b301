"""
Version Check Service - Version Check Orchestration

This module resolves the latest version of the configured repository
and compares it against a caller's version. Failures are raised as
exceptions; converting them to response envelopes is left to the routes.
"""

import logging
from typing import Any, Optional

from exceptions import ConfigurationError, InvalidRequestError, NoVersionsFoundError
from managers.github_manager import GitHubManager
from models.infrastructure import (
    LatestRelease,
    LatestTag,
    LatestVersionInfo,
    ServiceConfig,
    VersionCheckResult
)
from version_compare import CompareVersions, GetVersionDifference

logger = logging.getLogger(__name__)

# Messages returned to callers
MISSING_CONFIG_MESSAGE = (
    "Repository not configured. Set GITHUB_REPO_OWNER and GITHUB_REPO_NAME environment variables."
)
MISSING_VERSION_MESSAGE = "Missing required parameter: version"
INVALID_VERSION_MESSAGE = "Parameter 'version' must be a string"
NO_VERSIONS_MESSAGE = "No releases or tags found for this repository"


def RequireRepository(config: ServiceConfig):
    """
    Ensure owner and repository name are configured

    Args:
        config: Current service configuration

    Raises:
        ConfigurationError: If either value is missing
    """
    if not config.is_configured:
        logger.error("GITHUB_REPO_OWNER or GITHUB_REPO_NAME is not set")
        raise ConfigurationError(MISSING_CONFIG_MESSAGE)


def ExtractVersion(body: Any) -> str:
    """
    Get the version field from a decoded JSON request body

    Args:
        body: Decoded request body, normally a dict

    Returns:
        str: The caller's version

    Raises:
        InvalidRequestError: If the version is missing, empty or not a string
    """
    version = body.get("version") if isinstance(body, dict) else None

    # null, "", 0 and false all count as missing
    if version is None or version == "" or (isinstance(version, (int, float)) and not version):
        raise InvalidRequestError(MISSING_VERSION_MESSAGE)
    if not isinstance(version, str):
        raise InvalidRequestError(INVALID_VERSION_MESSAGE)

    return version


def ResolveLatestVersion(github: GitHubManager) -> LatestVersionInfo:
    """
    Find the latest version of a repository

    Uses the latest release when one exists, otherwise the first tag.

    Args:
        github: GitHub client for the configured repository

    Returns:
        LatestRelease or LatestTag

    Raises:
        NoVersionsFoundError: If the repository has neither releases nor tags
        GitHubAPIError: If GitHub answers with an unexpected status
    """
    release = github.GetLatestRelease()
    if release is not None:
        return LatestRelease.FromGitHub(release)

    tags = github.ListTags()
    if not tags:
        raise NoVersionsFoundError(NO_VERSIONS_MESSAGE)

    return LatestTag.FromGitHub(tags[0])


def CompareAgainstLatest(current_version: str, latest: LatestVersionInfo, repository: str) -> VersionCheckResult:
    """
    Compare a version with the resolved latest version

    Args:
        current_version: Version reported by the caller
        latest: Latest release or tag
        repository: "owner/repo" for the response

    Returns:
        VersionCheckResult
    """
    comparison = CompareVersions(current_version, latest.version)
    version_difference: Optional[str] = None
    if comparison < 0:
        version_difference = GetVersionDifference(current_version, latest.version)

    return VersionCheckResult(
        current_version=current_version,
        latest=latest,
        comparison=comparison,
        version_difference=version_difference,
        repository=repository
    )


def CheckVersion(config: ServiceConfig, current_version: str, github: Optional[GitHubManager] = None) -> VersionCheckResult:
    """
    Check a caller's version against the configured repository

    Args:
        config: Service configuration, must have owner and repository name
        current_version: Version reported by the caller
        github: Optional GitHub client, one is created and closed if omitted

    Returns:
        VersionCheckResult

    Raises:
        ConfigurationError: If the repository is not configured
        NoVersionsFoundError: If no release or tag exists
        GitHubAPIError: On unexpected GitHub responses
    """
    RequireRepository(config)

    logger.info(f"Checking version {current_version} against latest for {config.repository}")

    if github is not None:
        latest = ResolveLatestVersion(github)
    else:
        with GitHubManager(config) as client:
            latest = ResolveLatestVersion(client)

    result = CompareAgainstLatest(current_version, latest, config.repository)

    logger.info(
        f"Version check: current={current_version}, latest={latest.version}, source={latest.source}, "
        f"outdated={result.is_outdated}"
    )

    return result
