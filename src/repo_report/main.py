from __future__ import annotations
import asyncio
import logging
import sys
from repo_report.infrastructure.config import get_settings
from repo_report.interface.cli import run

def main() -> None:
    """Configure logging and run one interactive report session."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        stream=sys.stderr,
    )
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
