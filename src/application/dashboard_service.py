"""Application service for generating the organization dashboard."""

import logging
from datetime import datetime
from typing import Optional

from src.infrastructure.github_client import GitHubGraphQLClient
from src.infrastructure.report_writer import ReportWriter
from src.application.renderer import render_document

logger = logging.getLogger(__name__)

GITHUB_ORG = "mage-os"
DASHBOARD_TITLE = "Mage-OS GitHub Dashboard"


class DashboardService:
    """Service for fetching organization data and writing the HTML dashboard."""

    def __init__(
        self,
        github_client: GitHubGraphQLClient,
        report_writer: ReportWriter,
        org: str = GITHUB_ORG,
        title: str = DASHBOARD_TITLE,
        escape: bool = False
    ):
        """
        Initialize dashboard service.

        Args:
            github_client: GitHub API client
            report_writer: Writer for the rendered document
            org: Organization login to report on
            title: Dashboard page title
            escape: HTML-escape text taken from the API
        """
        self.github_client = github_client
        self.report_writer = report_writer
        self.org = org
        self.title = title
        self.escape = escape

    def generate(self, now: Optional[datetime] = None) -> str:
        """
        Fetch, render and write the dashboard.

        Nothing is written unless fetching and rendering both succeed.

        Args:
            now: Generation timestamp for the banner. Defaults to the current time.

        Returns:
            Path of the written dashboard file
        """
        organization = self.github_client.get_organization(self.org)
        document = render_document(organization, now=now, title=self.title, escape=self.escape)
        return self.report_writer.write(document)
