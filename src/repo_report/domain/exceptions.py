"""Domain exception hierarchy.

Every failure of the repository service surfaces as a
:class:`RepositoryServiceError`.  The subclasses only refine the message; the
report generator treats them all the same and the CLI prints them verbatim.
"""

from __future__ import annotations


class RepoReportError(Exception):
    """Base exception for the entire application."""


# ── Repository service errors ───────────────────────────────────────────────


class RepositoryServiceError(RepoReportError):
    """A call to the repository service failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RepositoryNotFoundError(RepositoryServiceError):
    """The user or repository does not exist (404)."""


class AuthenticationError(RepositoryServiceError):
    """The access token was rejected (401)."""


class AccessDeniedError(RepositoryServiceError):
    """Access to the resource was denied (403)."""


class GitHubRateLimitError(RepositoryServiceError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""
