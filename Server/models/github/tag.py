"""
Version Check Service - GitHub Tag Models

Pydantic models for entries of the repository tags API response.
"""

from pydantic import BaseModel


class GitHubTagCommit(BaseModel):
    """Commit a tag points to"""
    sha: str


class GitHubTag(BaseModel):
    """Single entry of the tags list"""
    name: str
    commit: GitHubTagCommit
