"""
Version Check Service - Service Configuration Model

Dataclass for the configuration read from the process environment.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ServiceConfig:
    """
    Repository and GitHub API settings for one request
    """
    repo_owner: Optional[str]
    repo_name: Optional[str]
    token: Optional[str] = None
    api_url: str = "https://api.github.com"
    user_agent: str = "Version-Check-Service"
    timeout: Optional[float] = None  # None leaves the transport default

    @property
    def is_configured(self) -> bool:
        """True when both owner and repository name are set"""
        return bool(self.repo_owner) and bool(self.repo_name)

    @property
    def repository(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"
