"""Port: repository service — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_report.domain.entities import (
    Branch,
    BranchListOptions,
    Repository,
    RepositoryListOptions,
)


class RepositoryService(Protocol):
    """Abstract contract for listing repositories, topics and branches."""

    async def list(
        self, username: str, options: RepositoryListOptions | None = None
    ) -> list[Repository]:
        """Return the repositories owned by *username*."""
        ...

    async def list_all_topics(self, owner: str, repo: str) -> list[str]:
        """Return every topic attached to ``owner/repo``."""
        ...

    async def list_branches(
        self, owner: str, repo: str, options: BranchListOptions | None = None
    ) -> list[Branch]:
        """Return the branches of ``owner/repo``."""
        ...
