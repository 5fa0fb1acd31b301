"""
Version Check Service - GitHub Manager

This module handles communication with the GitHub REST API.
Only the two read-only endpoints needed to find the latest version
of a repository are used.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from exceptions import GitHubAPIError
from models.github import GitHubRelease, GitHubTag
from models.infrastructure import ServiceConfig

# Configure logging
logger = logging.getLogger(__name__)

# Media type for the v3 REST API
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"


class GitHubManager:
    """
    Client for the GitHub releases and tags endpoints.

    Responsibilities:
    - Attach identifying, Accept and optional bearer headers to every call
    - Translate non-success status codes into GitHubAPIError
    - Validate payloads into GitHub models
    """

    def __init__(self, config: ServiceConfig, session: Optional[requests.Session] = None):
        """
        Initialize GitHub manager.

        Args:
            config: Service configuration with repository and API settings
            session: Optional requests session, a new one is created if omitted
        """
        self.config = config
        self.base_url = f"{config.api_url}/repos/{config.repo_owner}/{config.repo_name}"
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(self.BuildHeaders())
        logger.debug(f"Initialized GitHub client for {config.repository}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """
        Close the session and release resources.
        """
        if self.session:
            self.session.close()
            logger.debug("GitHub client session closed")

    def BuildHeaders(self) -> Dict[str, str]:
        """
        Build the headers sent with every request.

        Returns:
            Dict of HTTP headers
        """
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": GITHUB_ACCEPT_HEADER
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def _Get(self, endpoint: str) -> requests.Response:
        """
        Perform a GET request against the repository API.

        Args:
            endpoint: Path below /repos/{owner}/{repo} (e.g., "/tags")

        Returns:
            Raw response, status not yet checked

        Raises:
            requests.exceptions.RequestException: On network failure
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"GitHub request: GET {url}")
        response = self.session.get(url, timeout=self.config.timeout)
        logger.debug(f"GitHub response: {response.status_code} for {endpoint}")
        return response

    @staticmethod
    def _RaiseForStatus(response: requests.Response):
        """Raise GitHubAPIError for any non-2xx response"""
        if not response.ok:
            logger.error(f"GitHub API returned {response.status_code}: {response.reason}")
            raise GitHubAPIError(f"GitHub API error: {response.reason}", status_code=response.status_code)

    def GetLatestRelease(self) -> Optional[GitHubRelease]:
        """
        Get the latest published release.

        Returns:
            GitHubRelease, or None if the repository has no release (404)

        Raises:
            GitHubAPIError: On any other non-success status
        """
        response = self._Get("/releases/latest")

        if response.status_code == 404:
            logger.info(f"No release found for {self.config.repository}")
            return None

        self._RaiseForStatus(response)
        return GitHubRelease.model_validate(response.json())

    def ListTags(self) -> List[GitHubTag]:
        """
        List repository tags in the order GitHub returns them.

        Returns:
            List of GitHubTag, possibly empty

        Raises:
            GitHubAPIError: On any non-success status
        """
        response = self._Get("/tags")
        self._RaiseForStatus(response)

        tags_data: List[Dict[str, Any]] = response.json()
        return [GitHubTag.model_validate(tag) for tag in tags_data]
