"""
Version Check Service - Version Check Endpoints

This module contains the version check endpoint and the latest version
lookup. Every outcome, including failures, is returned as a JSON
envelope with a "success" flag.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from exceptions import ConfigurationError, InvalidRequestError, NoVersionsFoundError
from managers.config_manager import ConfigManager, GetConfigManager
from managers.github_manager import GitHubManager
from models.api import (
    FailureResponse,
    LatestVersionResponse,
    ReleaseVersionCheckResponse,
    TagVersionCheckResponse
)
from models.infrastructure import LatestRelease, LatestVersionInfo, ServiceConfig, VersionCheckResult
from version_check import CheckVersion, ExtractVersion, RequireRepository, ResolveLatestVersion


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


# ==================== Response Conversion ====================

def _JsonEnvelope(model: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=model.model_dump(), status_code=status_code)


def BuildFailureResponse(error: Exception) -> JSONResponse:
    """
    Convert an exception into a failure envelope

    This is the only place where errors become responses.

    Args:
        error: Exception raised while handling the request

    Returns:
        JSONResponse: {"success": false, "message": ...} with the matching status
    """
    if isinstance(error, ConfigurationError):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    elif isinstance(error, InvalidRequestError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, NoVersionsFoundError):
        # The check ran fine, there is just nothing to compare against
        status_code = status.HTTP_200_OK
    else:
        logger.error(f"Error: {error}", exc_info=True)
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return _JsonEnvelope(FailureResponse(message=str(error)), status_code)


def BuildCheckResponse(result: VersionCheckResult) -> JSONResponse:
    """
    Convert a version check result into the success envelope for its source

    Args:
        result: Outcome of the version check

    Returns:
        JSONResponse with HTTP 200
    """
    latest = result.latest
    common = {
        "latestVersion": latest.version,
        "currentVersion": result.current_version,
        "isOutdated": result.is_outdated,
        "versionDifference": result.version_difference,
        "repository": result.repository
    }

    if isinstance(latest, LatestRelease):
        body = ReleaseVersionCheckResponse(
            **common,
            name=latest.name,
            publishedAt=latest.published_at,
            htmlUrl=latest.html_url,
            prerelease=latest.prerelease,
            draft=latest.draft
        )
    else:
        body = TagVersionCheckResponse(**common, commitSha=latest.commit_sha)

    return _JsonEnvelope(body)


def BuildLatestResponse(latest: LatestVersionInfo, repository: str) -> JSONResponse:
    """
    Convert a resolved latest version into the lookup envelope

    Args:
        latest: Latest release or tag
        repository: "owner/repo"

    Returns:
        JSONResponse with HTTP 200
    """
    if isinstance(latest, LatestRelease):
        body = LatestVersionResponse(
            latestVersion=latest.version,
            source=latest.source,
            repository=repository,
            name=latest.name,
            publishedAt=latest.published_at,
            htmlUrl=latest.html_url,
            prerelease=latest.prerelease,
            draft=latest.draft
        )
    else:
        body = LatestVersionResponse(
            latestVersion=latest.version,
            source=latest.source,
            repository=repository,
            commitSha=latest.commit_sha
        )

    return _JsonEnvelope(body)


def _LookupLatest(config: ServiceConfig) -> LatestVersionInfo:
    with GitHubManager(config) as github:
        return ResolveLatestVersion(github)


async def _ReadJsonBody(request: Request):
    """Decode the request body, treating an empty body as an empty object"""
    raw = await request.body()
    if not raw.strip():
        return {}
    return await request.json()


# ==================== Version Endpoints ====================

@router.post("/", tags=["Version"])
@router.post("/api/version/check", tags=["Version"])
async def check_version(request: Request, config_manager: ConfigManager = Depends(GetConfigManager)):
    """
    Check whether the caller's version is behind the latest version

    Request body: {"version": "1.2.3"}

    Compares against the latest GitHub release of the configured
    repository, or against its first tag when no release exists.

    Args:
        request: Incoming request with a JSON body
        config_manager: Source of the repository configuration

    Returns:
        JSONResponse: Success envelope, or failure envelope with
        HTTP 500 (not configured or unexpected error), 400 (missing
        version) or 200 (no releases or tags)
    """
    try:
        config = config_manager.LoadConfig()
        RequireRepository(config)

        body = await _ReadJsonBody(request)
        version = ExtractVersion(body)

        # GitHub calls block, keep them off the event loop
        result = await run_in_threadpool(CheckVersion, config, version)
        return BuildCheckResponse(result)

    except Exception as e:
        return BuildFailureResponse(e)


@router.get("/api/version/latest", tags=["Version"])
async def get_latest_version(config_manager: ConfigManager = Depends(GetConfigManager)):
    """
    Get the latest version of the configured repository

    Returns the latest release, or the first tag when no release exists,
    without comparing it to anything.

    Args:
        config_manager: Source of the repository configuration

    Returns:
        JSONResponse: Latest version envelope or failure envelope
    """
    try:
        config = config_manager.LoadConfig()
        RequireRepository(config)

        logger.info(f"Looking up latest version for {config.repository}")

        latest = await run_in_threadpool(_LookupLatest, config)

        return BuildLatestResponse(latest, config.repository)

    except Exception as e:
        return BuildFailureResponse(e)
