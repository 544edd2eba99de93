"""postdiff: structural revisions between two versions of a post.

Public re-exports
-----------------

* **Generator:** :class:`RevisionGenerator`, :func:`generate_revision`
* **Configuration:** :class:`PostdiffConfig`
* **Errors:** Every :class:`PostdiffError` subclass and :class:`ErrorCode`
* **Models:** Posts, parts, revisions, deltas and supporting records
* **Storage:** The :class:`Storer` protocol

Usage::

    from postdiff import InlineBody, Part, Post, generate_revision

    before = Post(id="p1", title="Hello", parts=[Part(id="a", body=InlineBody(b"hi"))])
    after = Post(id="p1", title="Hello!", parts=[Part(id="a", body=InlineBody(b"hey"))])
    revision = generate_revision(before, after)
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from postdiff.config import PostdiffConfig

# ── Generator ───────────────────────────────────────────────────────────
from postdiff.diff import RevisionGenerator, TextDeltaCodec, generate_revision

# ── Errors ──────────────────────────────────────────────────────────────
from postdiff.errors import (
    ErrorCode,
    PostdiffError,
    PostdiffIdentityMismatchError,
    PostdiffNotFoundError,
    PostdiffValidationError,
)

# ── Models ──────────────────────────────────────────────────────────────
from postdiff.models import (
    NOT_PRESENT,
    AuthorsDelta,
    BlobBody,
    DeltaOp,
    HeaderDelta,
    InlineBody,
    Part,
    PartBody,
    PartDelta,
    Post,
    PostEvent,
    PostEventActorType,
    PostEventType,
    PostFilter,
    Revision,
    Stream,
    StringListFilterMode,
)

# ── Storage ─────────────────────────────────────────────────────────────
from postdiff.store import Storer

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Generator
    "RevisionGenerator",
    "generate_revision",
    "TextDeltaCodec",
    # Configuration
    "PostdiffConfig",
    # Errors
    "PostdiffError",
    "ErrorCode",
    "PostdiffIdentityMismatchError",
    "PostdiffNotFoundError",
    "PostdiffValidationError",
    # Models: documents
    "Post",
    "Part",
    "PartBody",
    "InlineBody",
    "BlobBody",
    "Stream",
    # Models: revisions
    "Revision",
    "DeltaOp",
    "AuthorsDelta",
    "PartDelta",
    "HeaderDelta",
    "NOT_PRESENT",
    # Models: audit and filtering
    "PostEvent",
    "PostEventType",
    "PostEventActorType",
    "PostFilter",
    "StringListFilterMode",
    # Storage
    "Storer",
]
