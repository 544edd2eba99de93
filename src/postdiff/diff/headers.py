"""Header map diffing.

Part headers map a name to an ordered list of values.  Each header is
diffed on its own with the positional differ, keyed by exact value, so a
value that changes text shows up as a removal plus an addition.  When both
land on the same slot they are folded into one ``up`` delta whose value is
a text delta of the header value.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from postdiff.models import DeltaOp, HeaderDelta

from .positions import MoveDetection, diff_positions
from .text_delta import TextDeltaCodec


def diff_headers(
    before: Mapping[str, Sequence[str]],
    after: Mapping[str, Sequence[str]],
    codec: TextDeltaCodec,
    *,
    pair_edits: bool = True,
    move_detection: MoveDetection = "relative",
) -> dict[str, list[HeaderDelta]]:
    """Return the value-level changes of every header that changed.

    Headers are visited in sorted name order.  Names with no change are
    left out of the result entirely.

    Parameters
    ----------
    before:
        Header map before the change.
    after:
        Header map after the change.
    codec:
        Used for the value deltas of folded edits.
    pair_edits:
        Fold a removal and an addition sharing a slot into an ``up``.
    move_detection:
        Passed through to the positional differ.
    """
    deltas: dict[str, list[HeaderDelta]] = {}
    for name in sorted(before.keys() | after.keys()):
        changes = diff_positions(
            before.get(name, ()),
            after.get(name, ()),
            move_detection=move_detection,
        )
        header_deltas = [
            HeaderDelta(
                op=change.op,
                header=name,
                from_position=change.from_position,
                to_position=change.to_position,
                value=change.key,
            )
            for change in changes
        ]
        if pair_edits:
            header_deltas = _fold_edits(header_deltas, codec)
        if header_deltas:
            deltas[name] = header_deltas
    return deltas


def _fold_edits(deltas: list[HeaderDelta], codec: TextDeltaCodec) -> list[HeaderDelta]:
    """Merge REMOVE+ADD pairs that share a slot into a single UPDATE.

    The merged entry takes the place of whichever of the two came first.
    """
    added_at = {d.to_position: i for i, d in enumerate(deltas) if d.op == DeltaOp.ADD}

    merged: dict[int, HeaderDelta] = {}
    dropped: set[int] = set()
    for rm_idx, removed in enumerate(deltas):
        if removed.op != DeltaOp.REMOVE:
            continue
        add_idx = added_at.get(removed.from_position)
        if add_idx is None:
            continue
        added = deltas[add_idx]
        first, second = sorted((rm_idx, add_idx))
        merged[first] = HeaderDelta(
            op=DeltaOp.UPDATE,
            header=removed.header,
            from_position=removed.from_position,
            to_position=added.to_position,
            value=codec.delta(removed.value, added.value),
        )
        dropped.add(second)

    return [merged.get(i, d) for i, d in enumerate(deltas) if i not in dropped]
