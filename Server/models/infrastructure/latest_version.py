"""
Version Check Service - Latest Version Models

Dataclasses for the latest version resolved from GitHub, either a
release or, when the repository has no release, a tag.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from models.github import GitHubRelease, GitHubTag


@dataclass
class LatestRelease:
    """
    Latest published release of a repository
    """
    tag_name: str
    name: Optional[str]
    published_at: Optional[str]
    html_url: str
    prerelease: bool
    draft: bool
    source: str = field(default="release", init=False)

    @property
    def version(self) -> str:
        """Version string used for comparison"""
        return self.tag_name

    @classmethod
    def FromGitHub(cls, release: GitHubRelease) -> "LatestRelease":
        return cls(
            tag_name=release.tag_name,
            name=release.name,
            published_at=release.published_at,
            html_url=release.html_url,
            prerelease=release.prerelease,
            draft=release.draft
        )


@dataclass
class LatestTag:
    """
    First tag of a repository, used when no release exists
    """
    name: str
    commit_sha: str
    source: str = field(default="tag", init=False)

    @property
    def version(self) -> str:
        """Version string used for comparison"""
        return self.name

    @classmethod
    def FromGitHub(cls, tag: GitHubTag) -> "LatestTag":
        return cls(name=tag.name, commit_sha=tag.commit.sha)


LatestVersionInfo = Union[LatestRelease, LatestTag]
