"""Diff engine for post revisions.

Exports
-------
RevisionGenerator
    Compares two snapshots of a post and builds a Revision.
generate_revision
    One-shot helper around RevisionGenerator.
diff_positions
    Positional add/remove/move diff of two keyed sequences.
diff_headers
    Value-level diff of two part header maps.
diff_parts
    Classified diff of two part collections.
TextDeltaCodec
    Compact diff-match-patch text deltas.
"""

from .headers import diff_headers
from .parts import diff_parts
from .positions import PositionalChange, diff_positions, walk_positions
from .revision import RevisionGenerator, generate_revision
from .text_delta import TextDeltaCodec, delta_from_strings

__all__ = [
    "PositionalChange",
    "RevisionGenerator",
    "TextDeltaCodec",
    "delta_from_strings",
    "diff_headers",
    "diff_parts",
    "diff_positions",
    "generate_revision",
    "walk_positions",
]
