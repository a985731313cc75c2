"""Generate-report use case — the per-repository report pipeline.

Depends only on the :class:`RepositoryService` port; the interface layer
injects the concrete GitHub adapter at runtime and tests inject fakes.
"""

from __future__ import annotations

import logging

from repo_report.domain.entities import (
    BranchListOptions,
    RepositoryListOptions,
    RepositoryReport,
)
from repo_report.domain.ports.repository_service import RepositoryService

logger = logging.getLogger(__name__)

MAX_REPOSITORIES = 2


async def generate_repos_report(
    username: str,
    access_token: str,
    repository_service: RepositoryService,
) -> list[RepositoryReport]:
    """Build a report for the first public repositories of *username*.

    Lists the user's public repositories, keeps at most the first
    :data:`MAX_REPOSITORIES` in listing order, and fetches topics and branches
    for each one.  Calls run one after another; the first exception raised by
    the service propagates unchanged and no partial result is returned.

    *access_token* is accepted but not used here: authentication belongs to
    whoever built *repository_service*.

    Cancellation is whatever the enclosing asyncio task does; it surfaces from
    the service call that is in flight.
    """
    repos = await repository_service.list(
        username, RepositoryListOptions(visibility="public")
    )
    selected = repos[:MAX_REPOSITORIES]
    logger.info(
        "Building report for %s: %d of %d repositories", username, len(selected), len(repos)
    )

    reports: list[RepositoryReport] = []
    for repo in selected:
        topics = await repository_service.list_all_topics(username, repo.name)
        branches = await repository_service.list_branches(
            username, repo.name, BranchListOptions()
        )
        logger.debug(
            "%s: %d topics, %d branches", repo.name, len(topics), len(branches)
        )
        reports.append(
            RepositoryReport(
                repository=repo,
                topics=tuple(topics),
                branches=tuple(branches),
            )
        )

    return reports
