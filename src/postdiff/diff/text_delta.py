"""Compact text deltas built on diff-match-patch.

A delta is the tab-separated diff-match-patch delta format::

    =3\\t-2\\t+ing   ->  keep 3 chars, delete 2 chars, insert "ing"

Inserted text is URL-quoted.  Any diff-match-patch port can turn the
delta back into the new text with ``diff_fromDelta(old, delta)``
followed by ``diff_text2``.

Identical inputs produce the empty delta ``""``, which means "no change".
It is not valid ``diff_fromDelta`` input for a non-empty old text, so
consumers must check for it and keep the old text as is.
"""

from __future__ import annotations

from diff_match_patch import diff_match_patch

DEFAULT_TIMEOUT = 1.0


class TextDeltaCodec:
    """Produces text deltas with semantic boundary cleanup.

    Parameters
    ----------
    timeout:
        Seconds a single diff may take before diff-match-patch settles for
        a coarser result.  ``0`` means no limit.
    checklines:
        Run a line-level speedup pass on large inputs first.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, checklines: bool = True) -> None:
        self._dmp = diff_match_patch()
        self._dmp.Diff_Timeout = timeout
        self._checklines = checklines

    def delta(self, old: str, new: str) -> str:
        """Return the delta that turns *old* into *new*."""
        if old == new:
            return ""
        diffs = self._dmp.diff_main(old, new, self._checklines)
        # Shift edit boundaries onto word and whitespace edges.
        self._dmp.diff_cleanupSemanticLossless(diffs)
        return self._dmp.diff_toDelta(diffs)


_default_codec = TextDeltaCodec()


def delta_from_strings(old: str, new: str) -> str:
    """Return the delta that turns *old* into *new* using default settings."""
    return _default_codec.delta(old, new)
