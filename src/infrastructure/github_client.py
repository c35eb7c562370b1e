"""GitHub GraphQL API client for organization dashboard data."""

import logging
import os
from typing import List, Optional, Dict, Any
import requests

from src.domain.repository import Issue, Label, Organization, PullRequest, Repository
from datetime import datetime

logger = logging.getLogger(__name__)


class RemoteServiceError(Exception):
    """Raised when the GitHub API answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class GraphQLError(RemoteServiceError):
    """Raised when a GraphQL response carries errors or no organization."""
    pass


class MalformedResponseError(Exception):
    """Raised when the GitHub API response body is not valid JSON."""
    pass


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub ISO-8601 timestamp ('...Z') into an aware datetime."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class GitHubGraphQLClient:
    """Client for GitHub GraphQL API. One request per call, no retries."""

    # Single page per list: anything past the first 100 repositories, issues
    # or pull requests is not fetched. Labels are capped at 5 per issue.

    GRAPHQL_ENDPOINT = "https://api.github.com/graphql"

    ORGANIZATION_QUERY = """
    query ($org: String!) {
        organization(login: $org) {
            repositories(first: 100, orderBy: {field: UPDATED_AT, direction: DESC}) {
                nodes {
                    name
                    url
                    updatedAt
                    issues(states: OPEN, first: 100, orderBy: {field: UPDATED_AT, direction: DESC}) {
                        totalCount
                        nodes {
                            title
                            url
                            createdAt
                            updatedAt
                            labels(first: 5) {
                                nodes {
                                    name
                                    color
                                }
                            }
                        }
                    }
                    pullRequests(states: OPEN, first: 100, orderBy: {field: UPDATED_AT, direction: DESC}) {
                        totalCount
                        nodes {
                            title
                            url
                            createdAt
                            updatedAt
                            author {
                                login
                            }
                        }
                    }
                }
            }
        }
    }
    """

    def __init__(self, token: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize GitHub GraphQL client.

        Args:
            token: GitHub personal access token. If None, uses GITHUB_TOKEN env var.
            timeout: Request timeout in seconds. None keeps the requests default (no timeout).
        """
        if token is None:
            token = os.getenv("GITHUB_TOKEN")

        self.token = token
        self.timeout = timeout
        # Always sent; with no token the API answers 401, which surfaces as RemoteServiceError
        self.headers = {
            "Authorization": f"Bearer {self.token or ''}",
            "Content-Type": "application/json",
        }

    def _execute_query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            GraphQL response data

        Raises:
            RemoteServiceError: If the response status is not 2xx
            GraphQLError: If the response body has no data
            MalformedResponseError: If the response body is not JSON
            requests.RequestException: If the request itself fails
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = requests.post(
            self.GRAPHQL_ENDPOINT,
            json=payload,
            headers=self.headers,
            timeout=self.timeout
        )

        if not 200 <= response.status_code < 300:
            logger.error(f"GitHub API returned {response.status_code} {response.reason}")
            raise RemoteServiceError(
                f"GitHub API error: {response.reason}",
                status_code=response.status_code,
                reason=response.reason
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Invalid JSON in GitHub API response: {e}") from e

        error_messages = [err.get("message", "") for err in data.get("errors") or []]
        if not data.get("data"):
            raise GraphQLError(f"GraphQL errors: {error_messages}", status_code=response.status_code)

        # Partial results (e.g. SAML-protected repositories) come with errors alongside data
        if error_messages:
            logger.warning(f"GitHub API returned partial data with errors: {error_messages}")

        return data["data"]

    def fetch_organization(self, org: str) -> Dict[str, Any]:
        """Run the organization query and return the raw ``data`` object."""
        logger.info(f"Querying GitHub for organization '{org}'")
        return self._execute_query(self.ORGANIZATION_QUERY, {"org": org})

    def get_organization(self, org: str) -> Organization:
        """
        Fetch an organization's repositories with their open issues and pull requests.

        Args:
            org: Organization login

        Returns:
            Organization with repositories in API order (most recently updated first)
        """
        data = self.fetch_organization(org)

        organization = data.get("organization")
        if organization is None:
            raise GraphQLError(f"Organization not found: {org}")

        nodes = (organization.get("repositories") or {}).get("nodes") or []
        repositories = [self._parse_repository(node) for node in nodes]

        logger.info(f"Fetched {len(repositories)} repositories for '{org}'")
        return Organization(login=org, repositories=tuple(repositories))

    def _parse_repository(self, node: Dict[str, Any]) -> Repository:
        issues_block = node.get("issues") or {}
        prs_block = node.get("pullRequests") or {}

        return Repository(
            name=node["name"],
            url=node["url"],
            updated_at=parse_timestamp(node["updatedAt"]),
            issue_count=issues_block.get("totalCount", 0),
            pull_request_count=prs_block.get("totalCount", 0),
            issues=tuple(self._parse_issue(n) for n in issues_block.get("nodes") or []),
            pull_requests=tuple(self._parse_pull_request(n) for n in prs_block.get("nodes") or []),
        )

    def _parse_issue(self, node: Dict[str, Any]) -> Issue:
        label_nodes: List[Dict[str, Any]] = (node.get("labels") or {}).get("nodes") or []
        return Issue(
            title=node["title"],
            url=node["url"],
            created_at=parse_timestamp(node["createdAt"]),
            updated_at=parse_timestamp(node["updatedAt"]),
            labels=tuple(Label(name=label["name"], color=label["color"]) for label in label_nodes),
        )

    def _parse_pull_request(self, node: Dict[str, Any]) -> PullRequest:
        # author is null when the account has been deleted
        author = node.get("author") or {}
        return PullRequest(
            title=node["title"],
            url=node["url"],
            created_at=parse_timestamp(node["createdAt"]),
            updated_at=parse_timestamp(node["updatedAt"]),
            author_login=author.get("login"),
        )
