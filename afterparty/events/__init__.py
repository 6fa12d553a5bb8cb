"""GitHub event payload models.

This module provides:
- Typed payload models for the known GitHub event kinds
- OpaqueEvent: fallback payload for any other kind
- patch_payload_json: pre-decoding rewrite of raw payloads
- parse_event: raw body to payload decoding
"""

from afterparty.events.models import (
    Branch,
    Comment,
    Commit,
    CommitAuthor,
    HookConfig,
    HookInfo,
    Issue,
    Label,
    PullRequest,
    PullRequestRef,
    Release,
    Repository,
    User,
    WikiPage,
)
from afterparty.events.parser import parse_event
from afterparty.events.patch import patch_payload_json
from afterparty.events.payloads import (
    KNOWN_EVENTS,
    CommitCommentEvent,
    CreateEvent,
    DeleteEvent,
    Event,
    EventPayload,
    ForkEvent,
    GollumEvent,
    IssueCommentEvent,
    IssuesEvent,
    LabelEvent,
    MemberEvent,
    OpaqueEvent,
    PingEvent,
    PublicEvent,
    PullRequestEvent,
    PullRequestReviewCommentEvent,
    PushEvent,
    ReleaseEvent,
    RepositoryEvent,
    StarEvent,
    StatusEvent,
    WatchEvent,
)

__all__ = [
    # Shared objects
    "Branch",
    "Comment",
    "Commit",
    "CommitAuthor",
    "HookConfig",
    "HookInfo",
    "Issue",
    "Label",
    "PullRequest",
    "PullRequestRef",
    "Release",
    "Repository",
    "User",
    "WikiPage",
    # Payloads
    "KNOWN_EVENTS",
    "CommitCommentEvent",
    "CreateEvent",
    "DeleteEvent",
    "Event",
    "EventPayload",
    "ForkEvent",
    "GollumEvent",
    "IssueCommentEvent",
    "IssuesEvent",
    "LabelEvent",
    "MemberEvent",
    "OpaqueEvent",
    "PingEvent",
    "PublicEvent",
    "PullRequestEvent",
    "PullRequestReviewCommentEvent",
    "PushEvent",
    "ReleaseEvent",
    "RepositoryEvent",
    "StarEvent",
    "StatusEvent",
    "WatchEvent",
    # Decoding
    "parse_event",
    "patch_payload_json",
]
