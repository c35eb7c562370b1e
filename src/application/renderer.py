"""HTML rendering for the organization dashboard.

Every function here is pure: it takes domain objects and returns a string.
The document is built by composing per-entity fragments, with no template
engine. Text is inserted verbatim unless ``escape`` is set, in which case
every interpolated value goes through :func:`html.escape`.
"""

import html
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from src.domain.repository import Issue, Label, Organization, PullRequest, Repository

DEFAULT_TITLE = "GitHub Dashboard"
STYLESHEET_URL = "https://cdn.jsdelivr.net/npm/@picocss/pico@1/css/pico.min.css"

# Shown for pull requests whose author account no longer exists
GHOST_AUTHOR = "ghost"

STYLES = """
          :root {
            --primary: #1095c1;
            --primary-hover: #086f93;
          }
          body { max-width: 1200px; margin: 0 auto; padding: 20px; }
          .repo { margin-bottom: 2rem; padding: 1.5rem; border-radius: 8px; background: var(--card-background-color); }
          .repo h3 { margin-top: 0; }
          .issues, .prs { margin-top: 1rem; }
          .item { padding: 0.8rem; margin: 0.5rem 0; border-radius: 4px; background: var(--card-sectionning-background-color); }
          .date { color: var(--muted-color); font-size: 0.9em; }
          .label {
            display: inline-block;
            padding: 2px 8px;
            border-radius: 12px;
            font-size: 0.8em;
            margin: 2px;
          }
          .stats {
            display: flex;
            gap: 1rem;
            margin-bottom: 1rem;
          }
          .stat-box {
            background: var(--card-sectionning-background-color);
            padding: 1rem;
            border-radius: 8px;
            text-align: center;
          }
          .last-update {
            text-align: right;
            color: var(--muted-color);
            font-size: 0.9em;
            margin-bottom: 1rem;
          }
"""


@dataclass(frozen=True)
class DashboardStats:
    """Aggregate counters shown at the top of the dashboard."""

    repository_count: int
    open_issue_count: int
    open_pull_request_count: int


def summarize(organization: Organization) -> DashboardStats:
    """Sum the API total counts, which may exceed the number of fetched items."""
    repos = organization.repositories
    return DashboardStats(
        repository_count=len(repos),
        open_issue_count=sum(repo.issue_count for repo in repos),
        open_pull_request_count=sum(repo.pull_request_count for repo in repos),
    )


def format_date(value: datetime) -> str:
    """Locale short date in the local timezone."""
    return value.astimezone().strftime("%x")


def format_timestamp(value: datetime) -> str:
    """Locale date and time in the local timezone."""
    return value.astimezone().strftime("%c")


def _text(value, escape: bool) -> str:
    value = str(value)
    return html.escape(value) if escape else value


def render_label(label: Label, escape: bool = False) -> str:
    color = _text(label.color, escape)
    return f"""
                      <span class="label" style="background: #{color}30; color: #{color};">{_text(label.name, escape)}</span>
                    """


def render_issue(issue: Issue, escape: bool = False) -> str:
    labels = "".join(render_label(label, escape) for label in issue.labels)
    return f"""
                  <div class="item">
                    <a href="{_text(issue.url, escape)}" target="_blank">{_text(issue.title, escape)}</a>
                    <div class="date">
                      Created: {format_date(issue.created_at)}
                      | Updated: {format_date(issue.updated_at)}
                    </div>
                    {labels}
                  </div>
                """


def render_pull_request(pull_request: PullRequest, escape: bool = False) -> str:
    author = pull_request.author_login or GHOST_AUTHOR
    return f"""
                  <div class="item">
                    <a href="{_text(pull_request.url, escape)}" target="_blank">{_text(pull_request.title, escape)}</a>
                    <div class="date">
                      Created: {format_date(pull_request.created_at)}
                      | Updated: {format_date(pull_request.updated_at)}
                      | By: {_text(author, escape)}
                    </div>
                  </div>
                """


def render_repository(repo: Repository, escape: bool = False) -> str:
    issues = "".join(render_issue(issue, escape) for issue in repo.issues)
    pull_requests = "".join(render_pull_request(pr, escape) for pr in repo.pull_requests)
    return f"""
            <article class="repo">
              <h3><a href="{_text(repo.url, escape)}" target="_blank">{_text(repo.name, escape)}</a></h3>
              <div class="issues">
                <h4>Open Issues ({repo.issue_count})</h4>
                {issues}
              </div>
              <div class="prs">
                <h4>Open Pull Requests ({repo.pull_request_count})</h4>
                {pull_requests}
              </div>
            </article>
          """


def render_document(
    organization: Organization,
    now: Optional[datetime] = None,
    title: str = DEFAULT_TITLE,
    escape: bool = False,
) -> str:
    """
    Render the complete dashboard document.

    Args:
        organization: Fetched organization data
        now: Generation time for the "Last updated" banner. Defaults to the current time.
        title: Page and header title
        escape: HTML-escape all interpolated text

    Returns:
        Self-contained HTML document
    """
    if now is None:
        now = datetime.now(timezone.utc)

    stats = summarize(organization)
    repositories = "".join(render_repository(repo, escape) for repo in organization.repositories)
    page_title = _text(title, escape)

    return f"""
    <!DOCTYPE html>
    <html lang="en">
      <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>{page_title}</title>
        <link rel="stylesheet" href="{STYLESHEET_URL}">
        <style>{STYLES}        </style>
      </head>
      <body>
        <header class="container">
          <h1>{page_title}</h1>
          <p class="last-update">Last updated: {format_timestamp(now)}</p>
        </header>
        <main class="container">
          <div class="stats">
            <div class="stat-box">
              <h4>Total Repositories</h4>
              <strong>{stats.repository_count}</strong>
            </div>
            <div class="stat-box">
              <h4>Total Open Issues</h4>
              <strong>{stats.open_issue_count}</strong>
            </div>
            <div class="stat-box">
              <h4>Total Open PRs</h4>
              <strong>{stats.open_pull_request_count}</strong>
            </div>
          </div>
          {repositories}
        </main>
      </body>
    </html>
  """
