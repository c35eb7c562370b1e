"""Domain entities for an organization's repositories, issues and pull requests."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Label:
    """Issue label. Color is a hex string without the leading '#'."""

    name: str
    color: str


@dataclass(frozen=True)
class Issue:
    """Immutable open issue snapshot."""

    title: str
    url: str
    created_at: datetime
    updated_at: datetime
    labels: Tuple[Label, ...] = ()


@dataclass(frozen=True)
class PullRequest:
    """Immutable open pull request snapshot."""

    title: str
    url: str
    created_at: datetime
    updated_at: datetime
    author_login: Optional[str] = None  # None when the author account was deleted


@dataclass(frozen=True)
class Repository:
    """Immutable repository entity."""

    name: str
    url: str
    updated_at: datetime
    issue_count: int
    pull_request_count: int
    issues: Tuple[Issue, ...] = ()
    pull_requests: Tuple[PullRequest, ...] = ()


@dataclass(frozen=True)
class Organization:
    """Result of a single organization query (at most 100 repositories)."""

    login: str
    repositories: Tuple[Repository, ...] = field(default_factory=tuple)
