"""
Tests for the release -> tags fallback and version comparison
"""

import pytest

from conftest import MakeRelease, MakeResponse, MakeTag
from exceptions import ConfigurationError, GitHubAPIError, InvalidRequestError, NoVersionsFoundError
from managers.github_manager import GitHubManager
from models.infrastructure import LatestRelease, LatestTag, ServiceConfig
from version_check import (
    MISSING_VERSION_MESSAGE,
    NO_VERSIONS_MESSAGE,
    CheckVersion,
    ExtractVersion,
    RequireRepository,
    ResolveLatestVersion
)


def test_resolve_uses_release_when_available(service_config, fake_session):
    fake_session.get.return_value = MakeResponse(200, MakeRelease("v2.0.0"))

    latest = ResolveLatestVersion(GitHubManager(service_config, session=fake_session))

    assert isinstance(latest, LatestRelease)
    assert latest.source == "release"
    assert latest.version == "v2.0.0"
    assert fake_session.get.call_count == 1


def test_resolve_falls_back_to_first_tag(service_config, fake_session):
    fake_session.get.side_effect = [
        MakeResponse(404),
        MakeResponse(200, [MakeTag("v1.1.0", "bbb"), MakeTag("v1.2.0", "ccc")]),
    ]

    latest = ResolveLatestVersion(GitHubManager(service_config, session=fake_session))

    assert isinstance(latest, LatestTag)
    assert latest.source == "tag"
    assert latest.version == "v1.1.0"
    assert latest.commit_sha == "bbb"


def test_resolve_without_releases_or_tags(service_config, fake_session):
    fake_session.get.side_effect = [MakeResponse(404), MakeResponse(200, [])]

    with pytest.raises(NoVersionsFoundError, match=NO_VERSIONS_MESSAGE):
        ResolveLatestVersion(GitHubManager(service_config, session=fake_session))


def test_resolve_does_not_fetch_tags_after_other_errors(service_config, fake_session):
    fake_session.get.return_value = MakeResponse(500)

    with pytest.raises(GitHubAPIError):
        ResolveLatestVersion(GitHubManager(service_config, session=fake_session))

    assert fake_session.get.call_count == 1


def test_resolve_tags_error_after_missing_release(service_config, fake_session):
    fake_session.get.side_effect = [MakeResponse(404), MakeResponse(403)]

    with pytest.raises(GitHubAPIError, match="Forbidden"):
        ResolveLatestVersion(GitHubManager(service_config, session=fake_session))


def test_check_version_outdated(service_config, fake_session):
    fake_session.get.return_value = MakeResponse(200, MakeRelease("v2.0.0"))

    result = CheckVersion(service_config, "1.5.0", GitHubManager(service_config, session=fake_session))

    assert result.is_outdated
    assert result.comparison == -1
    assert result.version_difference == "1 major version"
    assert result.repository == "octo-org/octo-app"


def test_check_version_up_to_date_has_no_difference(service_config, fake_session):
    fake_session.get.return_value = MakeResponse(200, MakeRelease("v1.5.0"))

    result = CheckVersion(service_config, "1.5.0", GitHubManager(service_config, session=fake_session))

    assert not result.is_outdated
    assert result.version_difference is None


def test_check_version_newer_than_latest(service_config, fake_session):
    fake_session.get.return_value = MakeResponse(200, MakeRelease("v1.5.0"))

    result = CheckVersion(service_config, "2.0.0", GitHubManager(service_config, session=fake_session))

    assert result.comparison == 1
    assert not result.is_outdated
    assert result.version_difference is None


def test_check_version_requires_repository():
    config = ServiceConfig(repo_owner=None, repo_name="octo-app")

    with pytest.raises(ConfigurationError):
        CheckVersion(config, "1.0.0")


def test_require_repository_accepts_configured(service_config):
    RequireRepository(service_config)


@pytest.mark.parametrize("body", [{}, {"version": ""}, {"version": None}, {"version": 0}, {"version": False}, [], "1.0.0", None])
def test_extract_version_missing(body):
    with pytest.raises(InvalidRequestError, match=MISSING_VERSION_MESSAGE):
        ExtractVersion(body)


def test_extract_version_rejects_non_string():
    with pytest.raises(InvalidRequestError, match="must be a string"):
        ExtractVersion({"version": 1.2})


def test_extract_version_ignores_other_fields():
    assert ExtractVersion({"version": "v1.0.0", "platform": "linux"}) == "v1.0.0"
