"""
Version Check Service - Version Check API Models

Request and response models for the version check endpoints. Response
field names are camelCase because they are part of the public JSON
envelope.
"""

from typing import Optional

from pydantic import BaseModel


class VersionCheckResponse(BaseModel):
    """
    Fields shared by both success envelopes
    """
    success: bool = True
    latestVersion: str
    currentVersion: str
    isOutdated: bool
    versionDifference: Optional[str]  # Null unless outdated


class ReleaseVersionCheckResponse(VersionCheckResponse):
    """
    Success envelope when the latest version comes from a release
    """
    name: Optional[str]
    publishedAt: Optional[str]
    htmlUrl: str
    prerelease: bool
    draft: bool
    source: str = "release"
    repository: str


class TagVersionCheckResponse(VersionCheckResponse):
    """
    Success envelope when the latest version comes from a tag
    """
    commitSha: str
    source: str = "tag"
    repository: str


class LatestVersionResponse(BaseModel):
    """
    Envelope for the latest version lookup without comparison.
    Release-only fields are null for tags and vice versa.
    """
    success: bool = True
    latestVersion: str
    source: str
    repository: str
    name: Optional[str] = None
    publishedAt: Optional[str] = None
    htmlUrl: Optional[str] = None
    prerelease: Optional[bool] = None
    draft: Optional[bool] = None
    commitSha: Optional[str] = None


class FailureResponse(BaseModel):
    """
    Envelope for every failed request
    """
    success: bool = False
    message: str
