"""Tests for diff/text_delta.py"""

from __future__ import annotations

import pytest

from postdiff.diff.text_delta import TextDeltaCodec, delta_from_strings


class TestNoOpDeltas:
    def test_identical_strings(self, codec):
        assert codec.delta("same", "same") == ""

    def test_empty_to_empty(self, codec):
        assert codec.delta("", "") == ""


class TestWireFormat:
    def test_pure_insertion(self, codec):
        assert codec.delta("", "new body") == "+new body"

    def test_pure_deletion(self, codec):
        assert codec.delta("draft text", "") == "-10"

    def test_append(self, codec):
        assert codec.delta("abc", "abcdef") == "=3\t+def"

    def test_keep_delete_insert(self, codec):
        assert codec.delta("hello", "hullo") == "=1\t-1\t+u\t=3"

    def test_inserted_tab_is_quoted(self, codec):
        delta = codec.delta("a", "a\tb")
        assert delta.split("\t") == ["=1", "+%09b"]


class TestReconstruction:
    @pytest.mark.parametrize(
        ("old", "new"),
        [
            ("hello", "hullo"),
            ("The quick brown fox", "The slow brown dog"),
            ("line one\nline two\n", "line one\nline 2\nline three\n"),
            ("café au lait", "cafe au lait"),
            ("", "from nothing"),
            ("to nothing", ""),
        ],
    )
    def test_delta_rebuilds_new_text(self, codec, apply_delta, old, new):
        assert apply_delta(old, codec.delta(old, new)) == new

    def test_word_boundaries_preferred(self, codec, apply_delta):
        old = "The cat came back."
        new = "The hat came back."
        delta = codec.delta(old, new)
        assert apply_delta(old, delta) == new
        assert delta.startswith("=4\t")


class TestSettings:
    def test_unbounded_timeout(self, apply_delta):
        codec = TextDeltaCodec(timeout=0)
        assert apply_delta("abc", codec.delta("abc", "abd")) == "abd"

    def test_without_line_pass(self, apply_delta):
        codec = TextDeltaCodec(checklines=False)
        old = "a\n" * 50
        new = "a\n" * 25 + "b\n" + "a\n" * 24
        assert apply_delta(old, codec.delta(old, new)) == new

    def test_module_helper_matches_codec(self, codec):
        assert delta_from_strings("kitten", "sitting") == codec.delta("kitten", "sitting")
