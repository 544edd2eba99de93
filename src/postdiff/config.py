"""Configuration for postdiff.

:class:`PostdiffConfig` is a plain dataclass that captures every tuneable
knob of the revision generator.  A default instance is used when the caller
does not pass one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

MOVE_DETECTION_MODES: tuple[str, ...] = ("relative", "index")
"""Accepted values for :attr:`PostdiffConfig.move_detection`."""


@dataclass
class PostdiffConfig:
    """Complete configuration for a revision generator.

    Every parameter has a default, so ``PostdiffConfig()`` is a working
    configuration.

    Parameters
    ----------
    text_diff_timeout:
        Upper bound in seconds for a single text diff (title, slug, header
        value or part body).  When exceeded, diff-match-patch returns a
        valid but less granular diff.  ``0`` disables the bound.
    text_diff_checklines:
        Run a line-level pass before the character diff.  Faster on large
        multi-line bodies, with slightly less optimal output.
    pair_header_edits:
        Fold a header value removal and a value addition that share the
        same slot into a single ``up`` delta carrying a text delta of the
        value.
    move_detection:
        How an item present on both sides is classified as moved.

        * ``"relative"`` -- only items that left the longest common
          subsequence of the shared items are moves; items that merely
          shifted because of insertions or removals elsewhere are not.
        * ``"index"`` -- any change of absolute index is a move.
    metrics:
        Optional :class:`~postdiff.observability.MetricsHook` backend.
    debug_dump_revision:
        Log every generated revision as JSON at ``DEBUG`` level on the
        ``postdiff.revision`` logger.
    """

    # ── Text diffing ────────────────────────────────────────────────────
    text_diff_timeout: float = 1.0

    text_diff_checklines: bool = True

    # ── Classification ──────────────────────────────────────────────────
    pair_header_edits: bool = True

    move_detection: Literal["relative", "index"] = "relative"

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_revision: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.text_diff_timeout < 0:
            raise ValueError(f"text_diff_timeout must be >= 0, got {self.text_diff_timeout}")
        if self.move_detection not in MOVE_DETECTION_MODES:
            raise ValueError(
                f"move_detection must be one of {', '.join(MOVE_DETECTION_MODES)}, "
                f"got {self.move_detection!r}"
            )
