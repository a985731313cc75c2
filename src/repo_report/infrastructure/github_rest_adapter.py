"""GitHub REST API adapter — implements the RepositoryService port."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import httpx

from repo_report.domain.entities import (
    Branch,
    BranchListOptions,
    Repository,
    RepositoryListOptions,
)
from repo_report.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
    RepositoryServiceError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_TOPICS_MEDIA_TYPE = "application/vnd.github.mercy-preview+json"


class GitHubRepositoryService:
    """Concrete RepositoryService backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        base_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-report/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def list(
        self, username: str, options: RepositoryListOptions | None = None
    ) -> list[Repository]:
        """GET /users/{username}/repos → [Repository]."""
        resp = await self._api_get(
            f"/users/{username}/repos",
            params=_query_params(options),
        )
        items = self._json(resp, expected=list)
        try:
            return [_to_repository(item) for item in items]
        except (KeyError, TypeError, AttributeError) as exc:
            raise _unexpected_payload(resp, exc) from exc

    async def list_all_topics(self, owner: str, repo: str) -> list[str]:
        """GET /repos/{owner}/{repo}/topics → [topic]."""
        resp = await self._api_get(
            f"/repos/{owner}/{repo}/topics",
            headers={"Accept": _TOPICS_MEDIA_TYPE},
        )
        names = self._json(resp, expected=dict).get("names", [])
        if not isinstance(names, list):
            raise _unexpected_payload(resp, "'names' is not a list")
        return [str(name) for name in names]

    async def list_branches(
        self, owner: str, repo: str, options: BranchListOptions | None = None
    ) -> list[Branch]:
        """GET /repos/{owner}/{repo}/branches → [Branch]."""
        resp = await self._api_get(
            f"/repos/{owner}/{repo}/branches",
            params=_query_params(options),
        )
        items = self._json(resp, expected=list)
        try:
            return [
                Branch(
                    name=item["name"],
                    commit_sha=(item.get("commit") or {}).get("sha"),
                    protected=bool(item.get("protected", False)),
                )
                for item in items
            ]
        except (KeyError, TypeError, AttributeError) as exc:
            raise _unexpected_payload(resp, exc) from exc

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = await self._client.get(
                url, headers={**self._api_headers, **(headers or {})}, params=params
            )
        except httpx.HTTPError as exc:
            raise RepositoryServiceError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(
                f"Not found: {endpoint}", status_code=404
            )

        if resp.status_code == 401:
            raise AuthenticationError(
                "Bad credentials. Check the GitHub access token.", status_code=401
            )

        if resp.status_code == 403:
            if resp.headers.get("x-ratelimit-remaining", "") == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}.",
                    status_code=403,
                )
            raise AccessDeniedError(f"Access denied: {endpoint}", status_code=403)

        if resp.status_code == 429:
            raise GitHubRateLimitError(
                "GitHub API rate limit exceeded (HTTP 429).", status_code=429
            )

        raise RepositoryServiceError(
            f"GitHub API returned HTTP {resp.status_code} for {url}",
            status_code=resp.status_code,
        )

    @staticmethod
    def _json(resp: httpx.Response, expected: type) -> Any:
        """Decode the body and check its top-level JSON type."""
        try:
            data = resp.json()
        except ValueError as exc:
            raise RepositoryServiceError(
                f"Invalid JSON from {resp.request.url}: {exc}"
            ) from exc
        if not isinstance(data, expected):
            raise _unexpected_payload(
                resp, f"expected a JSON {'array' if expected is list else 'object'}"
            )
        return data


def _unexpected_payload(resp: httpx.Response, reason: object) -> RepositoryServiceError:
    return RepositoryServiceError(f"Unexpected payload from {resp.request.url}: {reason}")


def _query_params(
    options: RepositoryListOptions | BranchListOptions | None,
) -> dict[str, str] | None:
    """Turn an options dataclass into query params, skipping unset fields."""
    if options is None:
        return None
    params: dict[str, str] = {}
    for key, value in asdict(options).items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params or None


def _to_repository(item: dict[str, Any]) -> Repository:
    owner = (item.get("owner") or {}).get("login", "")
    return Repository(
        name=item["name"],
        owner=owner,
        full_name=item.get("full_name") or f"{owner}/{item['name']}",
        description=item.get("description"),
        private=bool(item.get("private", False)),
        html_url=item.get("html_url"),
        default_branch=item.get("default_branch") or "main",
        language=item.get("language"),
        stargazers_count=item.get("stargazers_count") or 0,
    )
