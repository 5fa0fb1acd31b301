"""
Version Check Service - GitHub Models Package

This package contains Pydantic models for the GitHub API payloads
read by the service.
"""

from models.github.release import GitHubRelease
from models.github.tag import GitHubTag, GitHubTagCommit

__all__ = [
    'GitHubRelease',
    'GitHubTag',
    'GitHubTagCommit',
]
