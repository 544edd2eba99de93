"""Positional diff of two ordered collections of identifiable items.

Items are identified by a key (the item itself for author IDs and header
values, the part ID for parts).  Identity, not content, decides whether an
item was added, removed or moved; content comparison is left to callers
such as the part differ.

Iteration order: the keys of the longer sequence in their native order
(``after`` wins a tie), then the keys that only the shorter sequence
reaches, in its native order.  Every key is reported once.  A key that
repeats inside one sequence keeps its last index.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator, Sequence
from dataclasses import dataclass
from typing import Literal, TypeVar

from postdiff.models import NOT_PRESENT, DeltaOp

from .lcs_matcher import stable_keys

T = TypeVar("T")

MoveDetection = Literal["relative", "index"]


@dataclass(frozen=True)
class PositionalChange:
    """Where one key sits on each side of the diff.

    ``op`` is ``None`` when the key is present on both sides and was not
    moved.
    """

    key: Hashable
    op: DeltaOp | None
    from_position: int
    to_position: int


def _identity(item: T) -> Hashable:
    return item  # type: ignore[return-value]


def _index_keys(items: Sequence[T], key: Callable[[T], Hashable]) -> dict[Hashable, int]:
    positions: dict[Hashable, int] = {}
    for pos, item in enumerate(items):
        positions[key(item)] = pos
    return positions


def _visit_order(
    before: Sequence[T],
    after: Sequence[T],
    key: Callable[[T], Hashable],
) -> Iterator[Hashable]:
    longer, shorter = (after, before) if len(after) >= len(before) else (before, after)
    seen: set[Hashable] = set()
    for items in (longer, shorter):
        for item in items:
            k = key(item)
            if k not in seen:
                seen.add(k)
                yield k


def walk_positions(
    before: Sequence[T],
    after: Sequence[T],
    key: Callable[[T], Hashable] = _identity,
    move_detection: MoveDetection = "relative",
) -> Iterator[PositionalChange]:
    """Yield a :class:`PositionalChange` for every key of either sequence.

    Parameters
    ----------
    before:
        The collection before the change.
    after:
        The collection after the change.
    key:
        Extracts the identity of an item.  Defaults to the item itself.
    move_detection:
        ``"relative"`` reports a shared key as moved only when it is not
        part of the longest common subsequence of the shared keys;
        ``"index"`` reports any change of index as a move.
    """
    before_pos = _index_keys(before, key)
    after_pos = _index_keys(after, key)

    stable: set[Hashable] | None = None
    if move_detection == "relative":
        shared = before_pos.keys() & after_pos.keys()
        stable = stable_keys(
            sorted(shared, key=before_pos.__getitem__),
            sorted(shared, key=after_pos.__getitem__),
        )

    for k in _visit_order(before, after, key):
        from_pos = before_pos.get(k, NOT_PRESENT)
        to_pos = after_pos.get(k, NOT_PRESENT)
        op: DeltaOp | None = None
        if from_pos == NOT_PRESENT:
            op = DeltaOp.ADD
        elif to_pos == NOT_PRESENT:
            op = DeltaOp.REMOVE
        elif stable is not None:
            if k not in stable:
                op = DeltaOp.MOVE
        elif from_pos != to_pos:
            op = DeltaOp.MOVE
        yield PositionalChange(key=k, op=op, from_position=from_pos, to_position=to_pos)


def diff_positions(
    before: Sequence[T],
    after: Sequence[T],
    key: Callable[[T], Hashable] = _identity,
    move_detection: MoveDetection = "relative",
) -> list[PositionalChange]:
    """Return only the keys that were added, removed or moved.

    See :func:`walk_positions` for the parameters.
    """
    return [
        change
        for change in walk_positions(before, after, key, move_detection)
        if change.op is not None
    ]
