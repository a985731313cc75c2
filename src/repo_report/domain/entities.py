"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Repository:
    """A repository as returned by the repository listing."""

    name: str
    owner: str = ""
    full_name: str = ""
    description: str | None = None
    private: bool = False
    html_url: str | None = None
    default_branch: str = "main"
    language: str | None = None
    stargazers_count: int = 0


@dataclass(frozen=True, slots=True)
class Branch:
    """A single branch of a repository."""

    name: str
    commit_sha: str | None = None
    protected: bool = False


@dataclass(frozen=True, slots=True)
class RepositoryListOptions:
    """Query options for listing a user's repositories.

    Fields left as ``None`` are not sent to the service.
    """

    visibility: str | None = "public"
    sort: str | None = None
    direction: str | None = None
    per_page: int | None = None
    page: int | None = None


@dataclass(frozen=True, slots=True)
class BranchListOptions:
    """Query options for listing a repository's branches."""

    protected: bool | None = None
    per_page: int | None = None
    page: int | None = None


@dataclass(frozen=True, slots=True)
class RepositoryReport:
    """Aggregated view of one repository: metadata, topics and branches."""

    repository: Repository
    topics: tuple[str, ...] = ()
    branches: tuple[Branch, ...] = ()

    @property
    def branch_names(self) -> list[str]:
        return [b.name for b in self.branches]
