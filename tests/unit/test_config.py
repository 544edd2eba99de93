"""Tests for config.py"""

from __future__ import annotations

import pytest

from postdiff.config import PostdiffConfig


class TestDefaults:
    def test_default_values(self):
        config = PostdiffConfig()
        assert config.text_diff_timeout == 1.0
        assert config.text_diff_checklines is True
        assert config.pair_header_edits is True
        assert config.move_detection == "relative"
        assert config.metrics is None
        assert config.debug_dump_revision is False


class TestValidation:
    def test_negative_timeout_rejected(self):
        with pytest.raises(ValueError, match="text_diff_timeout"):
            PostdiffConfig(text_diff_timeout=-1)

    def test_zero_timeout_allowed(self):
        assert PostdiffConfig(text_diff_timeout=0).text_diff_timeout == 0

    def test_unknown_move_detection_rejected(self):
        with pytest.raises(ValueError, match="move_detection"):
            PostdiffConfig(move_detection="lcs")  # type: ignore[arg-type]

    def test_index_mode_accepted(self):
        assert PostdiffConfig(move_detection="index").move_detection == "index"
