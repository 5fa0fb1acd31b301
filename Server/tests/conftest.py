"""
Shared pytest fixtures for the Version Check Service
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep log files out of the working directory
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "version-check-test-logs"))

from models.infrastructure import ServiceConfig


REPO_OWNER = "octo-org"
REPO_NAME = "octo-app"

HTTP_REASONS = {
    200: "OK",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
}


def MakeResponse(status_code: int, payload: Any = None, reason: Optional[str] = None, raw: Optional[bytes] = None) -> requests.Response:
    """Build a requests.Response carrying a JSON payload"""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason if reason is not None else HTTP_REASONS.get(status_code, "")
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(payload if payload is not None else {}).encode("utf-8")
    return response


def MakeRelease(tag_name: str = "v2.0.0", **overrides) -> dict:
    """GitHub latest release payload"""
    release = {
        "url": f"https://api.github.com/repos/{REPO_OWNER}/{REPO_NAME}/releases/1",
        "id": 1,
        "tag_name": tag_name,
        "name": f"Release {tag_name}",
        "body": "Release notes",
        "published_at": "2026-03-01T12:00:00Z",
        "html_url": f"https://github.com/{REPO_OWNER}/{REPO_NAME}/releases/tag/{tag_name}",
        "prerelease": False,
        "draft": False,
        "assets": [],
    }
    release.update(overrides)
    return release


def MakeTag(name: str, sha: str = "a1b2c3d4e5f6") -> dict:
    """Entry of the GitHub tags list"""
    return {
        "name": name,
        "commit": {
            "sha": sha,
            "url": f"https://api.github.com/repos/{REPO_OWNER}/{REPO_NAME}/commits/{sha}",
        },
        "zipball_url": f"https://api.github.com/repos/{REPO_OWNER}/{REPO_NAME}/zipball/{name}",
    }


@pytest.fixture
def service_config():
    """Configured repository without a token"""
    return ServiceConfig(repo_owner=REPO_OWNER, repo_name=REPO_NAME)


@pytest.fixture
def fake_session():
    """
    Real requests.Session whose get() is a mock.

    Set fake_session.get.side_effect to a list of responses.
    """
    session = requests.Session()
    session.get = MagicMock()
    yield session
    session.close()
