"""
Version Check Service - GitHub Release Model

Pydantic model for the "latest release" API response.
"""

from typing import Optional

from pydantic import BaseModel


class GitHubRelease(BaseModel):
    """
    Subset of a GitHub release payload

    Fields not listed here are ignored. GitHub returns null for name
    on untitled releases and for published_at on drafts.
    """
    tag_name: str
    name: Optional[str] = None
    published_at: Optional[str] = None  # ISO 8601, passed through unchanged
    html_url: str
    prerelease: bool = False
    draft: bool = False
