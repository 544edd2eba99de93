"""Evaluation of :class:`~postdiff.models.PostFilter` against posts.

Storage backends that cannot push filters down to their database can use
:func:`filter_posts` to implement :meth:`Storer.list` in memory.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from postdiff.errors import PostdiffValidationError
from postdiff.models import Post, PostFilter, StringListFilterMode


def match_string_list(
    values: Sequence[str],
    wanted: Sequence[str],
    mode: StringListFilterMode,
) -> bool:
    """Return whether *values* satisfies *wanted* under *mode*."""
    if mode == StringListFilterMode.EXACT:
        return list(values) == list(wanted)
    if mode == StringListFilterMode.EXACT_UNORDERED:
        return Counter(values) == Counter(wanted)
    if mode == StringListFilterMode.CONTAINS_ALL:
        return set(wanted).issubset(values)
    if mode == StringListFilterMode.CONTAINS_ANY:
        return not set(wanted).isdisjoint(values)
    if mode == StringListFilterMode.EXCLUDES:
        return set(wanted).isdisjoint(values)
    raise PostdiffValidationError(
        message=f"Unknown string list filter mode {mode!r}",
        context={"field": "mode", "value": mode},
    )


def _list_criterion(
    name: str,
    values: Sequence[str],
    wanted: Sequence[str],
    mode: StringListFilterMode | None,
) -> bool:
    if not wanted:
        return True
    if mode is None:
        raise PostdiffValidationError(
            message=f"Filter on {name} needs a {name}_mode",
            context={"field": f"{name}_mode", "value": None, "constraint": "required"},
        )
    return match_string_list(values, wanted, mode)


def matches(post_filter: PostFilter, post: Post) -> bool:
    """Return ``True`` if *post* satisfies every criterion of *post_filter*.

    Publication bounds are exclusive.  A post that was never published
    fails any publication bound.

    Raises
    ------
    PostdiffValidationError
        If a list criterion is set without its mode.
    """
    if post_filter.slug is not None and post.slug != post_filter.slug:
        return False
    if post_filter.draft is not None and post.draft != post_filter.draft:
        return False
    if post_filter.published_before is not None and (
        post.published_at is None or post.published_at >= post_filter.published_before
    ):
        return False
    if post_filter.published_after is not None and (
        post.published_at is None or post.published_at <= post_filter.published_after
    ):
        return False
    return _list_criterion(
        "authors", post.authors, post_filter.authors, post_filter.authors_mode,
    ) and _list_criterion(
        "streams", post.streams, post_filter.streams, post_filter.streams_mode,
    )


def filter_posts(posts: Iterable[Post], post_filter: PostFilter) -> list[Post]:
    """Return the matching posts sorted by ``published_at``, newest first.

    Posts that were never published sort last, in their input order.
    """
    selected = [post for post in posts if matches(post_filter, post)]
    published = [post for post in selected if post.published_at is not None]
    unpublished = [post for post in selected if post.published_at is None]
    published.sort(key=lambda post: post.published_at, reverse=True)
    return published + unpublished
