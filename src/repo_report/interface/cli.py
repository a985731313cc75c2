"""Interactive command-line interface — prompts, wiring and output."""

from __future__ import annotations

import getpass
import logging
from typing import Callable

import httpx

from repo_report.domain.entities import RepositoryReport
from repo_report.domain.exceptions import RepoReportError
from repo_report.infrastructure.config import Settings
from repo_report.infrastructure.github_rest_adapter import GitHubRepositoryService
from repo_report.services.generate_report import generate_repos_report
from repo_report.services.render_report import render_report

logger = logging.getLogger(__name__)

USERNAME_PROMPT = "Enter GitHub username: "
TOKEN_PROMPT = (
    "Enter GitHub access token "
    "(you can create one at https://github.com/settings/tokens): "
)


def prompt_credentials(
    settings: Settings,
    read_line: Callable[[str], str] = input,
    read_secret: Callable[[str], str] = getpass.getpass,
) -> tuple[str, str]:
    """Ask for the username, and for the token unless one is configured."""
    username = read_line(USERNAME_PROMPT).strip()
    if settings.github_token is not None:
        return username, settings.github_token.get_secret_value()
    return username, read_secret(TOKEN_PROMPT).strip()


async def build_report(
    username: str, access_token: str, settings: Settings
) -> list[RepositoryReport]:
    """Open an HTTP client, wire the GitHub adapter and run the use case."""
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout)) as client:
        service = GitHubRepositoryService(
            client=client,
            token=access_token or None,
            base_url=settings.github_api_url,
        )
        return await generate_repos_report(username, access_token, service)


async def run(
    settings: Settings,
    read_line: Callable[[str], str] = input,
    read_secret: Callable[[str], str] = getpass.getpass,
) -> int:
    """Run one interactive session and return the process exit code."""
    try:
        username, access_token = prompt_credentials(settings, read_line, read_secret)
    except EOFError:
        print()
        print("Error: input closed before credentials were entered")
        return 1

    print("Generating report...")
    try:
        reports = await build_report(username, access_token, settings)
    except RepoReportError as exc:
        logger.warning("%s: %s", type(exc).__name__, exc)
        print(f"Error: {exc}")
        return 1
    except Exception as exc:
        logger.exception("Unhandled exception")
        print(f"Error: {exc}")
        return 1

    print()
    print(render_report(reports))
    return 0
