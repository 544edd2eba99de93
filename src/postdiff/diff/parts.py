"""Part collection diffing.

Parts are matched by ID.  The positional differ decides between add,
remove and move; a body or header change then promotes the entry to
``up`` (or ``mvup`` when the part also moved).  Unchanged parts produce no
entry.

Body handling depends on where each side's content lives:

========================  ==============================================
before -> after           recorded
========================  ==============================================
inline -> inline          ``body`` = delta(old text, new text)
blob -> inline            ``sha256_from``, ``body`` = delta("", new text)
inline -> blob            ``sha256_to``, ``body`` = delta(old text, "")
blob -> blob              ``sha256_from`` and ``sha256_to``, no ``body``
========================  ==============================================

A missing side (added or removed part) counts as an empty inline body.
"""

from __future__ import annotations

from collections.abc import Sequence

from postdiff.models import BlobBody, DeltaOp, InlineBody, Part, PartBody, PartDelta

from .headers import diff_headers
from .positions import MoveDetection, walk_positions
from .text_delta import TextDeltaCodec

_EMPTY_BODY = InlineBody()

_PROMOTIONS: dict[DeltaOp | None, DeltaOp] = {
    None: DeltaOp.UPDATE,
    DeltaOp.MOVE: DeltaOp.MOVE_UPDATE,
}


def _part_id(part: Part) -> str:
    return part.id


def _promote(op: DeltaOp | None) -> DeltaOp | None:
    return _PROMOTIONS.get(op, op)


def diff_parts(
    before: Sequence[Part],
    after: Sequence[Part],
    codec: TextDeltaCodec,
    *,
    pair_header_edits: bool = True,
    move_detection: MoveDetection = "relative",
) -> list[PartDelta]:
    """Return one :class:`PartDelta` per part that changed.

    Parameters
    ----------
    before:
        Parts before the change.
    after:
        Parts after the change.
    codec:
        Produces the body and header value deltas.
    pair_header_edits:
        Passed to :func:`~postdiff.diff.headers.diff_headers`.
    move_detection:
        Passed to the positional differ and the header differ.
    """
    before_by_id = {part.id: part for part in before}
    after_by_id = {part.id: part for part in after}

    deltas: list[PartDelta] = []
    for change in walk_positions(before, after, _part_id, move_detection):
        old = before_by_id.get(change.key)
        new = after_by_id.get(change.key)
        op = change.op

        if old is not None and new is not None and old.body != new.body:
            op = _promote(op)

        headers = diff_headers(
            old.headers if old is not None else {},
            new.headers if new is not None else {},
            codec,
            pair_edits=pair_header_edits,
            move_detection=move_detection,
        )
        if headers:
            op = _promote(op)

        if op is None:
            continue

        body, sha256_from, sha256_to = _body_change(
            old.body if old is not None else _EMPTY_BODY,
            new.body if new is not None else _EMPTY_BODY,
            codec,
        )
        deltas.append(
            PartDelta(
                part_id=change.key,
                op=op,
                from_position=change.from_position,
                to_position=change.to_position,
                headers=headers,
                body=body,
                sha256_from=sha256_from,
                sha256_to=sha256_to,
            )
        )
    return deltas


def _body_change(
    old: PartBody,
    new: PartBody,
    codec: TextDeltaCodec,
) -> tuple[str, str, str]:
    """Return ``(body_delta, sha256_from, sha256_to)`` for a body transition."""
    sha256_from = old.sha256 if isinstance(old, BlobBody) else ""
    sha256_to = new.sha256 if isinstance(new, BlobBody) else ""

    if isinstance(old, BlobBody) and isinstance(new, BlobBody):
        return "", sha256_from, sha256_to

    old_text = old.text if isinstance(old, InlineBody) else ""
    new_text = new.text if isinstance(new, InlineBody) else ""
    return codec.delta(old_text, new_text), sha256_from, sha256_to
