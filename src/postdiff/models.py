"""Public data models for postdiff.

This module contains the post and part records that are compared, every
delta type produced by the revision generator, and the supporting records
(streams, audit events, post filters) exchanged with storage backends.
All types are plain dataclasses; the delta types are frozen because a
revision is never modified once generated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

from postdiff.utils.hashing import sha256_hex

NOT_PRESENT = -1
"""Position recorded for the side of a delta on which the item is absent."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class DeltaOp(str, Enum):
    """The single kind of change recorded by a delta entry."""

    ADD = "add"
    """The item only exists after the revision."""

    REMOVE = "rm"
    """The item only exists before the revision."""

    UPDATE = "up"
    """The item kept its place but its contents changed."""

    MOVE = "mv"
    """The item changed position but not contents."""

    MOVE_UPDATE = "mvup"
    """The item changed both position and contents."""


class PostEventType(str, Enum):
    """Things that can happen to a post, as recorded in its audit trail."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    PUBLISHED = "published"
    """A draft post was published."""

    UNPUBLISHED = "unpublished"
    """A published post was reverted to a draft."""


class PostEventActorType(str, Enum):
    """Who took an action on a post."""

    USER = "user"
    """A human took a manual action."""

    SYSTEM = "system"
    """An automated process took the action."""


class StringListFilterMode(str, Enum):
    """How a list of strings in a :class:`PostFilter` is matched."""

    EXACT = "exact"
    """Same values in the same order."""

    EXACT_UNORDERED = "exact_unordered"
    """Same values, any order."""

    CONTAINS_ALL = "contains_all"
    """Every filter value is present; other values may be too."""

    CONTAINS_ANY = "contains_any"
    """At least one filter value is present."""

    EXCLUDES = "excludes"
    """None of the filter values is present."""


# ---------------------------------------------------------------------------
# Part bodies
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InlineBody:
    """Part content stored alongside the post and diffed as text.

    Attributes
    ----------
    data:
        The raw content.  Decoded as UTF-8 when diffed.
    """

    data: bytes = b""

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class BlobBody:
    """Part content held in external blob storage, known only by its hash.

    Attributes
    ----------
    sha256:
        Hex SHA-256 digest of the blob content.
    """

    sha256: str

    @classmethod
    def from_bytes(cls, data: bytes) -> BlobBody:
        """Build a blob reference for *data* without keeping the bytes."""
        return cls(sha256=sha256_hex(data))


PartBody = Union[InlineBody, BlobBody]


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------

@dataclass
class Part:
    """An independently editable chunk of a post's body or metadata.

    Attributes
    ----------
    id:
        Identifier that stays stable across edits to the same logical part.
    headers:
        Content type and rendering parameters.  Each header maps to an
        ordered list of values; order is significant.
    position:
        Order of the part within its collection.  Denormalised; the diff
        uses the list order instead.
    body:
        Either an :class:`InlineBody` or a :class:`BlobBody`.
    """

    id: str
    headers: dict[str, list[str]] = field(default_factory=dict)
    position: int = 0
    body: PartBody = field(default_factory=InlineBody)

    @property
    def inline(self) -> bool:
        return isinstance(self.body, InlineBody)

    @property
    def sha256(self) -> str:
        """Hash of a blob body, or ``""`` for inline parts."""
        if isinstance(self.body, BlobBody):
            return self.body.sha256
        return ""

    @property
    def text(self) -> str:
        """Inline body as text, or ``""`` for blob parts."""
        if isinstance(self.body, InlineBody):
            return self.body.text
        return ""


@dataclass
class Post:
    """A versioned composite document.

    Only ``id``, ``title``, ``slug``, ``authors``, ``parts`` and
    ``metadata`` take part in revision generation; the remaining fields
    are maintained by the storage layer.

    Attributes
    ----------
    id:
        Identifier shared by every version of the post.
    title:
        Human-friendly title, suitable for display.
    slug:
        URL component identifying the post, usually derived from the title.
    authors:
        Opaque IDs of the authors, in display order.
    parts:
        Pieces rendered as the post body.
    metadata:
        Pieces describing the post (summary, cover image...) that are not
        part of the body.
    streams:
        IDs of the streams the post belongs to.
    draft:
        Whether the post is unpublished.
    deleted:
        Whether the post is soft-deleted.
    published_at:
        Last time the post was published.
    """

    id: str
    title: str = ""
    slug: str = ""
    authors: list[str] = field(default_factory=list)
    parts: list[Part] = field(default_factory=list)
    metadata: list[Part] = field(default_factory=list)
    streams: list[str] = field(default_factory=list)
    draft: bool = False
    deleted: bool = False
    published_at: datetime | None = None


@dataclass
class Stream:
    """A series of posts.

    Attributes
    ----------
    id:
        Identifier of the stream.
    title:
        Human-friendly description.
    slug:
        URL-friendly encoding of the title.
    metadata:
        Parts carrying rendering information such as header images.
    authors:
        IDs of the users allowed to write to the stream.
    """

    id: str
    title: str = ""
    slug: str = ""
    metadata: list[Part] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)


@dataclass
class PostEvent:
    """An action taken on a post, kept for auditing.

    Attributes
    ----------
    id:
        Identifier of the event.
    type:
        What happened.
    ip:
        Address the action was taken from.
    actor:
        ID of the actor that took the action.
    actor_type:
        Whether the actor is a user or the system.
    session_id:
        Session the action was taken in, for tracing back how the session
        was started.
    timestamp:
        When the action was taken.
    """

    id: str
    type: PostEventType
    ip: str = ""
    actor: str = ""
    actor_type: PostEventActorType = PostEventActorType.USER
    session_id: str = ""
    timestamp: datetime | None = None


@dataclass
class PostFilter:
    """Criteria for selecting posts from a storage backend.

    ``None`` (or an empty list) leaves a criterion unset.  Evaluation lives
    in :func:`postdiff.store.filters.matches`.

    Attributes
    ----------
    slug:
        Exact slug to match.
    authors:
        Author IDs, compared according to ``authors_mode``.
    authors_mode:
        Required whenever ``authors`` is non-empty.
    published_before:
        Exclusive upper bound on ``published_at``.
    published_after:
        Exclusive lower bound on ``published_at``.
    draft:
        Required draft status.
    streams:
        Stream IDs, compared according to ``streams_mode``.
    streams_mode:
        Required whenever ``streams`` is non-empty.
    """

    slug: str | None = None
    authors: list[str] = field(default_factory=list)
    authors_mode: StringListFilterMode | None = None
    published_before: datetime | None = None
    published_after: datetime | None = None
    draft: bool | None = None
    streams: list[str] = field(default_factory=list)
    streams_mode: StringListFilterMode | None = None

    def is_empty(self) -> bool:
        """Return ``True`` when no criterion is set."""
        return (
            self.slug is None
            and not self.authors
            and self.published_before is None
            and self.published_after is None
            and self.draft is None
            and not self.streams
        )


# ---------------------------------------------------------------------------
# Deltas
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AuthorsDelta:
    """A change to a post's author list.

    Author IDs are opaque, so ``op`` is only ever ``ADD``, ``REMOVE`` or
    ``MOVE``.

    Attributes
    ----------
    op:
        The kind of change.
    from_position:
        Index before the revision, or :data:`NOT_PRESENT`.
    to_position:
        Index after the revision, or :data:`NOT_PRESENT`.
    value:
        The author ID.
    """

    op: DeltaOp
    from_position: int
    to_position: int
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "from_position": self.from_position,
            "to_position": self.to_position,
            "value": self.value,
        }


@dataclass(frozen=True)
class HeaderDelta:
    """A change to one value of a part header.

    Attributes
    ----------
    op:
        The kind of change.
    header:
        The header name.
    from_position:
        Index of the value before the revision, or :data:`NOT_PRESENT`.
    to_position:
        Index of the value after the revision, or :data:`NOT_PRESENT`.
    value:
        The header value itself for ``ADD``, ``REMOVE`` and ``MOVE``; a
        text delta from the old value to the new one for ``UPDATE``.
    """

    op: DeltaOp
    header: str
    from_position: int
    to_position: int
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "header": self.header,
            "from_position": self.from_position,
            "to_position": self.to_position,
            "value": self.value,
        }


@dataclass(frozen=True)
class PartDelta:
    """The change one part went through.

    Attributes
    ----------
    part_id:
        ID of the changed part.
    op:
        The kind of change.
    from_position:
        Index before the revision, or :data:`NOT_PRESENT`.
    to_position:
        Index after the revision, or :data:`NOT_PRESENT`.
    headers:
        Read-only map of header name to the ordered value-level changes of
        that header.  Headers without changes are absent.  Any mapping
        passed in is copied, with its lists turned into tuples.
    body:
        Text delta of the body.  When an inline part becomes a blob this
        deletes the whole inline text; when a blob becomes inline it
        inserts the whole text.  Empty when neither side is inline, and
        when the decoded text did not change.  Inline bytes are decoded
        as UTF-8 with invalid sequences replaced by U+FFFD, so two bodies
        that differ only in invalid bytes (``b"\\xff"`` and ``b"\\xfe"``)
        produce an ``up`` entry whose empty body cannot rebuild the new
        bytes.
    sha256_from:
        Hash of the starting blob, when the starting body is a blob.
    sha256_to:
        Hash of the resulting blob, when the resulting body is a blob.
    """

    part_id: str
    op: DeltaOp
    from_position: int
    to_position: int
    headers: Mapping[str, tuple[HeaderDelta, ...]] = field(default_factory=dict)
    body: str = ""
    sha256_from: str = ""
    sha256_to: str = ""

    def __post_init__(self) -> None:
        frozen = {name: tuple(deltas) for name, deltas in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash((
            self.part_id,
            self.op,
            self.from_position,
            self.to_position,
            tuple(sorted(self.headers.items())),
            self.body,
            self.sha256_from,
            self.sha256_to,
        ))

    def to_dict(self) -> dict[str, Any]:
        return {
            "part_id": self.part_id,
            "op": self.op.value,
            "from_position": self.from_position,
            "to_position": self.to_position,
            "headers": {
                name: [d.to_dict() for d in deltas]
                for name, deltas in self.headers.items()
            },
            "body": self.body,
            "sha256_from": self.sha256_from,
            "sha256_to": self.sha256_to,
        }


@dataclass(frozen=True)
class Revision:
    """An atomic update to a post.

    Attributes
    ----------
    id:
        Identifier of the revision.
    public:
        Whether the revision is visible to readers or a silent edit.
        Set by the caller.
    reason:
        Why the revision was made.  Set by the caller.
    title_delta:
        Text delta of the title; empty when unchanged.
    slug_delta:
        Text delta of the slug; empty when unchanged.
    authors_deltas:
        Changes to the author list.
    parts_deltas:
        Changes to the body parts.
    metadata_deltas:
        Changes to the metadata parts.
    """

    id: str = ""
    public: bool = False
    reason: str = ""
    title_delta: str = ""
    slug_delta: str = ""
    authors_deltas: tuple[AuthorsDelta, ...] = ()
    parts_deltas: tuple[PartDelta, ...] = ()
    metadata_deltas: tuple[PartDelta, ...] = ()

    def is_empty(self) -> bool:
        """Return ``True`` when the revision records no change at all."""
        return not (
            self.title_delta
            or self.slug_delta
            or self.authors_deltas
            or self.parts_deltas
            or self.metadata_deltas
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping for persistence."""
        return {
            "id": self.id,
            "public": self.public,
            "reason": self.reason,
            "title_delta": self.title_delta,
            "slug_delta": self.slug_delta,
            "authors_deltas": [d.to_dict() for d in self.authors_deltas],
            "parts_deltas": [d.to_dict() for d in self.parts_deltas],
            "metadata_deltas": [d.to_dict() for d in self.metadata_deltas],
        }
