"""
Version Check Service - Version Check Result Model

Dataclass holding the outcome of comparing a caller's version against
the latest version of the configured repository.
"""

from dataclasses import dataclass
from typing import Optional

from models.infrastructure.latest_version import LatestVersionInfo


@dataclass
class VersionCheckResult:
    """
    Outcome of a successful version check
    """
    current_version: str
    latest: LatestVersionInfo
    comparison: int  # -1, 0 or 1, current compared to latest
    version_difference: Optional[str]  # Only set when outdated
    repository: str  # "owner/repo"

    @property
    def is_outdated(self) -> bool:
        return self.comparison < 0
