"""Objects shared between GitHub event payloads.

GitHub documents only part of each payload and the shape drifts between
event kinds, so every model keeps unknown fields and most documented fields
are optional. Timestamps arrive as ISO-8601 strings in most payloads but as
Unix epoch integers in ``push`` repositories; both are normalized to
``datetime`` on validation.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    """Base model for GitHub payload objects."""

    model_config = ConfigDict(extra="allow", frozen=True)


class User(GitHubModel):
    """A GitHub user or organization account."""

    login: str
    id: int | None = None
    type: str | None = None
    site_admin: bool = False
    avatar_url: str | None = None
    html_url: str | None = None


class CommitAuthor(GitHubModel):
    """Git author or committer identity as embedded in push payloads."""

    name: str | None = None
    email: str | None = None
    username: str | None = None


class Repository(GitHubModel):
    """A repository as embedded in event payloads."""

    id: int
    name: str
    full_name: str
    owner: User | CommitAuthor | None = None
    private: bool = False
    fork: bool = False
    html_url: str | None = None
    description: str | None = None
    default_branch: str | None = None
    language: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    forks_count: int | None = None
    open_issues_count: int | None = None


class Label(GitHubModel):
    """An issue or pull request label."""

    name: str
    color: str | None = None
    id: int | None = None
    url: str | None = None
    default: bool = False


class Issue(GitHubModel):
    """An issue (or the issue view of a pull request)."""

    id: int
    number: int
    title: str
    state: str | None = None
    user: User | None = None
    body: str | None = None
    labels: list[Label] = Field(default_factory=list)
    assignee: User | None = None
    assignees: list[User] = Field(default_factory=list)
    comments: int | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class Comment(GitHubModel):
    """A comment on an issue, commit or pull request diff."""

    id: int
    body: str
    user: User | None = None
    html_url: str | None = None
    commit_id: str | None = None
    path: str | None = None
    position: int | None = None
    line: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PullRequestRef(GitHubModel):
    """The head or base side of a pull request."""

    ref: str
    sha: str
    label: str | None = None
    user: User | None = None
    repo: Repository | None = None


class PullRequest(GitHubModel):
    """A pull request."""

    id: int
    number: int
    state: str
    title: str
    user: User | None = None
    body: str | None = None
    head: PullRequestRef | None = None
    base: PullRequestRef | None = None
    merged: bool | None = None
    merged_by: User | None = None
    merge_commit_sha: str | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None


class Commit(GitHubModel):
    """A commit as listed in a push payload."""

    id: str
    message: str
    timestamp: datetime | None = None
    url: str | None = None
    distinct: bool = True
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)


class Release(GitHubModel):
    """A published or drafted release."""

    id: int
    tag_name: str
    name: str | None = None
    target_commitish: str | None = None
    draft: bool = False
    prerelease: bool = False
    body: str | None = None
    author: User | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    published_at: datetime | None = None


class WikiPage(GitHubModel):
    """A wiki page touched by a gollum event."""

    page_name: str
    title: str
    action: str
    sha: str | None = None
    summary: str | None = None
    html_url: str | None = None


class HookConfig(GitHubModel):
    """Delivery configuration of the hook that sent a ping."""

    url: str | None = None
    content_type: str | None = None
    insecure_ssl: str | None = None


class HookInfo(GitHubModel):
    """The remote hook description carried by ping events."""

    id: int | None = None
    type: str | None = None
    name: str | None = None
    active: bool = True
    events: list[str] = Field(default_factory=list)
    config: HookConfig | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Branch(GitHubModel):
    """A branch reference listed by status events."""

    name: str
    commit: dict[str, Any] = Field(default_factory=dict)
