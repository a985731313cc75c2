"""Plain-text rendering of repository reports."""

from __future__ import annotations

from typing import Sequence

from repo_report.domain.entities import RepositoryReport

HEADER = "REPOSITORIES REPORT:"


def render_report(reports: Sequence[RepositoryReport]) -> str:
    """Render *reports* as one three-line block per repository."""
    lines = [HEADER]
    for report in reports:
        topics = ", ".join(report.topics)
        lines.append(f"Repo: {report.repository.name}")
        lines.append(f"Topics: [{topics}]")
        lines.append(" ".join(["Branches:", *report.branch_names]))
    return "\n".join(lines)
