"""Revision generation: compare two snapshots of a post.

:class:`RevisionGenerator` diffs the title and slug as text, the author
list positionally, and the part and metadata collections with the part
differ, and assembles the results into a :class:`~postdiff.models.Revision`.

The comparison is not commutative.  Callers must pass the older snapshot
first; swapping the arguments produces a different revision, not an
inverted one.
"""

from __future__ import annotations

import time
import uuid
from collections import Counter
from typing import Any

from postdiff.config import PostdiffConfig
from postdiff.errors import PostdiffIdentityMismatchError
from postdiff.models import AuthorsDelta, Part, PartDelta, Post, Revision
from postdiff.observability import NoopMetricsHook, get_logger

from .parts import diff_parts
from .positions import diff_positions
from .text_delta import TextDeltaCodec

log = get_logger("postdiff.revision")


class RevisionGenerator:
    """Builds revisions between two versions of the same post.

    The generator holds no per-call state, so one instance can serve
    concurrent callers.

    Parameters
    ----------
    config:
        Tuning and observability settings.  Defaults to
        ``PostdiffConfig()``.
    """

    def __init__(self, config: PostdiffConfig | None = None) -> None:
        self._config = config if config is not None else PostdiffConfig()
        self._codec = TextDeltaCodec(
            timeout=self._config.text_diff_timeout,
            checklines=self._config.text_diff_checklines,
        )
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    def generate(
        self,
        before: Post,
        after: Post,
        revision_id: str | None = None,
    ) -> Revision:
        """Describe every change between *before* and *after*.

        Parameters
        ----------
        before:
            The older snapshot.
        after:
            The newer snapshot.  Must have the same ``id`` as *before*.
        revision_id:
            ID for the revision.  A random UUID is used when omitted.

        Returns
        -------
        Revision
            Only changed items are listed.  ``public`` and ``reason`` are
            left at their defaults for the caller to fill in.

        Raises
        ------
        PostdiffIdentityMismatchError
            If the two posts have different IDs.
        """
        if before.id != after.id:
            raise PostdiffIdentityMismatchError(
                message=f"Cannot diff post {before.id!r} against post {after.id!r}",
                context={"before_id": before.id, "after_id": after.id},
            )

        started = time.perf_counter()
        config = self._config

        title_delta = ""
        if before.title != after.title:
            title_delta = self._codec.delta(before.title, after.title)

        slug_delta = ""
        if before.slug != after.slug:
            slug_delta = self._codec.delta(before.slug, after.slug)

        authors_deltas = tuple(
            AuthorsDelta(
                op=change.op,
                from_position=change.from_position,
                to_position=change.to_position,
                value=change.key,
            )
            for change in diff_positions(
                before.authors,
                after.authors,
                move_detection=config.move_detection,
            )
        )

        parts_deltas = tuple(self._diff_parts(before.parts, after.parts))
        metadata_deltas = tuple(self._diff_parts(before.metadata, after.metadata))

        revision = Revision(
            id=revision_id if revision_id is not None else str(uuid.uuid4()),
            title_delta=title_delta,
            slug_delta=slug_delta,
            authors_deltas=authors_deltas,
            parts_deltas=parts_deltas,
            metadata_deltas=metadata_deltas,
        )

        elapsed_ms = (time.perf_counter() - started) * 1000
        _emit_revision_metrics(self._metrics, revision, elapsed_ms)
        if config.debug_dump_revision:
            _dump_revision(before.id, revision)
        return revision

    def _diff_parts(self, before: list[Part], after: list[Part]) -> list[PartDelta]:
        return diff_parts(
            before,
            after,
            self._codec,
            pair_header_edits=self._config.pair_header_edits,
            move_detection=self._config.move_detection,
        )


def generate_revision(
    before: Post,
    after: Post,
    config: PostdiffConfig | None = None,
) -> Revision:
    """Shortcut for ``RevisionGenerator(config).generate(before, after)``."""
    return RevisionGenerator(config).generate(before, after)


def _emit_revision_metrics(metrics: Any, revision: Revision, elapsed_ms: float) -> None:
    """Emit ``revisions_total``, ``deltas_total`` and the generation timing."""
    metrics.increment("postdiff.revisions_total")
    metrics.timing("postdiff.generate_duration_ms", elapsed_ms)

    op_counts: Counter[tuple[str, str]] = Counter()
    for field_name, deltas in (
        ("authors", revision.authors_deltas),
        ("parts", revision.parts_deltas),
        ("metadata", revision.metadata_deltas),
    ):
        for delta in deltas:
            op_counts[(field_name, delta.op.value)] += 1
    for (field_name, op), count in op_counts.items():
        metrics.increment(
            "postdiff.deltas_total", count, tags={"field": field_name, "op": op},
        )


def _dump_revision(post_id: str, revision: Revision) -> None:
    log.debug(
        "revision generated",
        extra={
            "extra_fields": {
                "post_id": post_id,
                "revision": revision,
            }
        },
    )
