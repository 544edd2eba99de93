"""Storage interface for posts and their revisions.

postdiff does no I/O.  Storage backends implement :class:`Storer`; the
revision generator only ever sees the :class:`~postdiff.models.Post` values
a backend returns, and hands back the :class:`~postdiff.models.Revision`
the backend should record.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from postdiff.errors import PostdiffValidationError
from postdiff.models import Post, PostFilter, Revision


@runtime_checkable
class Storer(Protocol):
    """Protocol every post storage backend must satisfy.

    Backends raise :class:`~postdiff.errors.PostdiffNotFoundError` for
    unknown IDs and :class:`~postdiff.errors.PostdiffValidationError` for
    posts that cannot be stored.
    """

    def create(self, post: Post) -> None:
        """Persist *post* as it is."""
        ...

    def update(self, post_id: str, revision: Revision) -> None:
        """Apply *revision* to the post with ID *post_id*."""
        ...

    def delete(self, post_id: str) -> Post:
        """Mark the post as deleted and return it."""
        ...

    def get(self, post_id: str) -> Post:
        """Return the post with ID *post_id*."""
        ...

    def list(self, post_filter: PostFilter) -> list[Post]:
        """Return the posts matching *post_filter*, newest publication first."""
        ...


def check_new_post(post: Post) -> None:
    """Raise :class:`PostdiffValidationError` if *post* lacks required fields.

    Backends call this from :meth:`Storer.create`.
    """
    if not post.id:
        raise PostdiffValidationError(
            message="Post ID is required",
            context={"field": "id", "value": post.id, "constraint": "non-empty"},
        )
    if not post.slug:
        raise PostdiffValidationError(
            message=f"Post {post.id!r} has no slug",
            context={"field": "slug", "value": post.slug, "constraint": "non-empty"},
        )
    part_ids = [part.id for part in post.parts] + [part.id for part in post.metadata]
    if any(not part_id for part_id in part_ids):
        raise PostdiffValidationError(
            message=f"Post {post.id!r} has a part without an ID",
            context={"field": "parts", "constraint": "non-empty part IDs"},
        )
