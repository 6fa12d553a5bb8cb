"""Typed GitHub event payloads.

Each known event kind maps to one model whose ``event`` field is a literal
kind name. ``Event`` is the closed discriminated union over those models;
``OpaqueEvent`` carries the raw JSON text of any kind outside that set.
"""

import json
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from afterparty.events.models import (
    Branch,
    Comment,
    Commit,
    CommitAuthor,
    GitHubModel,
    HookInfo,
    Issue,
    Label,
    PullRequest,
    Release,
    Repository,
    User,
    WikiPage,
)


class EventBase(GitHubModel):
    """Fields present on (almost) every event payload."""

    repository: Repository | None = None
    sender: User | None = None
    organization: dict[str, Any] | None = None
    installation: dict[str, Any] | None = None


class PingEvent(EventBase):
    """Sent when a new webhook is created."""

    event: Literal["ping"]
    zen: str
    hook_id: int | None = None
    hook: HookInfo | None = None


class PushEvent(EventBase):
    """One or more commits pushed to a branch or tag."""

    event: Literal["push"]
    ref: str
    before: str
    after: str
    created: bool = False
    deleted: bool = False
    forced: bool = False
    base_ref: str | None = None
    compare: str | None = None
    commits: list[Commit] = Field(default_factory=list)
    head_commit: Commit | None = None
    pusher: CommitAuthor | None = None


class CreateEvent(EventBase):
    """A branch or tag was created."""

    event: Literal["create"]
    ref: str | None = None
    ref_type: str
    master_branch: str | None = None
    description: str | None = None
    pusher_type: str | None = None


class DeleteEvent(EventBase):
    """A branch or tag was deleted."""

    event: Literal["delete"]
    ref: str
    ref_type: str
    pusher_type: str | None = None


class ForkEvent(EventBase):
    """A repository was forked."""

    event: Literal["fork"]
    forkee: Repository


class WatchEvent(EventBase):
    """Someone starred a repository (legacy watch naming)."""

    event: Literal["watch"]
    action: str


class StarEvent(EventBase):
    """A star was added or removed."""

    event: Literal["star"]
    action: str
    starred_at: datetime | None = None


class IssuesEvent(EventBase):
    """Activity on an issue."""

    event: Literal["issues"]
    action: str
    issue: Issue
    label: Label | None = None
    assignee: User | None = None
    changes: dict[str, Any] | None = None


class IssueCommentEvent(EventBase):
    """A comment on an issue or pull request conversation."""

    event: Literal["issue_comment"]
    action: str
    issue: Issue
    comment: Comment
    changes: dict[str, Any] | None = None


class PullRequestEvent(EventBase):
    """Activity on a pull request."""

    event: Literal["pull_request"]
    action: str
    number: int
    pull_request: PullRequest
    label: Label | None = None
    assignee: User | None = None
    changes: dict[str, Any] | None = None


class PullRequestReviewCommentEvent(EventBase):
    """A comment on a pull request diff."""

    event: Literal["pull_request_review_comment"]
    action: str
    comment: Comment
    pull_request: PullRequest


class ReleaseEvent(EventBase):
    """Activity on a release."""

    event: Literal["release"]
    action: str
    release: Release


class StatusEvent(EventBase):
    """The status of a commit changed."""

    event: Literal["status"]
    sha: str
    state: str
    id: int | None = None
    name: str | None = None
    context: str | None = None
    description: str | None = None
    target_url: str | None = None
    branches: list[Branch] = Field(default_factory=list)
    commit: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CommitCommentEvent(EventBase):
    """A comment on a commit."""

    event: Literal["commit_comment"]
    comment: Comment
    action: str | None = None


class GollumEvent(EventBase):
    """Wiki pages were created or updated."""

    event: Literal["gollum"]
    pages: list[WikiPage]


class LabelEvent(EventBase):
    """A repository label was created, edited or deleted."""

    event: Literal["label"]
    action: str
    label: Label
    changes: dict[str, Any] | None = None


class MemberEvent(EventBase):
    """A collaborator was added to or removed from a repository."""

    event: Literal["member"]
    action: str
    member: User
    changes: dict[str, Any] | None = None


class PublicEvent(EventBase):
    """A private repository was made public."""

    event: Literal["public"]


class RepositoryEvent(EventBase):
    """A repository was created, deleted, archived or otherwise changed."""

    event: Literal["repository"]
    action: str
    changes: dict[str, Any] | None = None


class OpaqueEvent(GitHubModel):
    """Payload of an event kind without a typed model.

    ``raw`` is the delivery body exactly as received.
    """

    event: str
    raw: str

    def data(self) -> Any:
        """Decode the raw JSON body."""
        return json.loads(self.raw)


Event = Annotated[
    PingEvent
    | PushEvent
    | CreateEvent
    | DeleteEvent
    | ForkEvent
    | WatchEvent
    | StarEvent
    | IssuesEvent
    | IssueCommentEvent
    | PullRequestEvent
    | PullRequestReviewCommentEvent
    | ReleaseEvent
    | StatusEvent
    | CommitCommentEvent
    | GollumEvent
    | LabelEvent
    | MemberEvent
    | PublicEvent
    | RepositoryEvent,
    Field(discriminator="event"),
]

EventPayload = Event | OpaqueEvent

EVENT_ADAPTER = TypeAdapter(Event)

KNOWN_EVENTS: frozenset[str] = frozenset(
    {
        "ping",
        "push",
        "create",
        "delete",
        "fork",
        "watch",
        "star",
        "issues",
        "issue_comment",
        "pull_request",
        "pull_request_review_comment",
        "release",
        "status",
        "commit_comment",
        "gollum",
        "label",
        "member",
        "public",
        "repository",
    }
)
