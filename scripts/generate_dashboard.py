#!/usr/bin/env python3
"""Script to generate the organization's GitHub dashboard."""

import locale
import logging
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.infrastructure.github_client import GitHubGraphQLClient
from src.infrastructure.report_writer import ReportWriter
from src.application.dashboard_service import DashboardService

logger = logging.getLogger(__name__)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes")


def _log_level() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO


def main():
    """Generate the dashboard. Returns the process exit code."""
    logging.basicConfig(
        level=_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        # Dates are formatted with the environment's locale
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not apply environment locale, using default: {e}")

    try:
        github_token = os.getenv("GITHUB_TOKEN")
        if not github_token:
            logger.warning("GITHUB_TOKEN not found. The GitHub API will reject the request.")

        service = DashboardService(
            GitHubGraphQLClient(token=github_token),
            ReportWriter(),
            escape=_env_flag("DASHBOARD_ESCAPE_HTML")
        )
        output_path = service.generate()

        logger.info(f"Dashboard generated successfully: {output_path}")
        return 0

    except Exception as e:
        logger.error(f"Error generating dashboard: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
