"""Tests for diff/headers.py"""

from __future__ import annotations

from postdiff.diff.headers import diff_headers
from postdiff.models import NOT_PRESENT, DeltaOp, HeaderDelta


class TestHeaderMoves:
    def test_swapped_values_single_move(self, codec):
        deltas = diff_headers({"X-Tag": ["one", "two"]}, {"X-Tag": ["two", "one"]}, codec)
        assert deltas == {
            "X-Tag": [HeaderDelta(DeltaOp.MOVE, "X-Tag", 1, 0, "two")],
        }

    def test_swapped_values_index_mode(self, codec):
        deltas = diff_headers(
            {"X-Tag": ["one", "two"]},
            {"X-Tag": ["two", "one"]},
            codec,
            move_detection="index",
        )
        assert deltas == {
            "X-Tag": [
                HeaderDelta(DeltaOp.MOVE, "X-Tag", 1, 0, "two"),
                HeaderDelta(DeltaOp.MOVE, "X-Tag", 0, 1, "one"),
            ],
        }


class TestHeaderAddRemove:
    def test_unchanged_headers_omitted(self, codec):
        headers = {"Content-Type": ["text/markdown"], "X-Tag": ["a", "b"]}
        assert diff_headers(headers, dict(headers), codec) == {}

    def test_new_header(self, codec):
        deltas = diff_headers({}, {"X-Tag": ["a", "b"]}, codec)
        assert deltas == {
            "X-Tag": [
                HeaderDelta(DeltaOp.ADD, "X-Tag", NOT_PRESENT, 0, "a"),
                HeaderDelta(DeltaOp.ADD, "X-Tag", NOT_PRESENT, 1, "b"),
            ],
        }

    def test_dropped_header(self, codec):
        deltas = diff_headers({"X-Tag": ["a"]}, {}, codec)
        assert deltas == {
            "X-Tag": [HeaderDelta(DeltaOp.REMOVE, "X-Tag", 0, NOT_PRESENT, "a")],
        }

    def test_names_sorted(self, codec):
        deltas = diff_headers({}, {"b": ["1"], "a": ["1"], "c": ["1"]}, codec)
        assert list(deltas) == ["a", "b", "c"]

    def test_appended_value(self, codec):
        deltas = diff_headers({"X-Tag": ["a"]}, {"X-Tag": ["a", "b"]}, codec)
        assert deltas == {
            "X-Tag": [HeaderDelta(DeltaOp.ADD, "X-Tag", NOT_PRESENT, 1, "b")],
        }


class TestHeaderValueEdits:
    def test_edit_in_place_becomes_update(self, codec, apply_delta):
        deltas = diff_headers(
            {"Content-Type": ["text/plain"]},
            {"Content-Type": ["text/html"]},
            codec,
        )
        [delta] = deltas["Content-Type"]
        assert delta.op == DeltaOp.UPDATE
        assert (delta.from_position, delta.to_position) == (0, 0)
        assert apply_delta("text/plain", delta.value) == "text/html"

    def test_edit_without_pairing(self, codec):
        deltas = diff_headers(
            {"Content-Type": ["text/plain"]},
            {"Content-Type": ["text/html"]},
            codec,
            pair_edits=False,
        )
        assert deltas == {
            "Content-Type": [
                HeaderDelta(DeltaOp.ADD, "Content-Type", NOT_PRESENT, 0, "text/html"),
                HeaderDelta(DeltaOp.REMOVE, "Content-Type", 0, NOT_PRESENT, "text/plain"),
            ],
        }

    def test_different_slots_not_paired(self, codec):
        deltas = diff_headers({"X-Tag": ["a", "b"]}, {"X-Tag": ["c", "a"]}, codec)
        assert deltas == {
            "X-Tag": [
                HeaderDelta(DeltaOp.ADD, "X-Tag", NOT_PRESENT, 0, "c"),
                HeaderDelta(DeltaOp.REMOVE, "X-Tag", 1, NOT_PRESENT, "b"),
            ],
        }

    def test_middle_value_edited(self, codec, apply_delta):
        deltas = diff_headers(
            {"X-Tag": ["a", "draft", "c"]},
            {"X-Tag": ["a", "final", "c"]},
            codec,
        )
        [delta] = deltas["X-Tag"]
        assert delta.op == DeltaOp.UPDATE
        assert (delta.from_position, delta.to_position) == (1, 1)
        assert apply_delta("draft", delta.value) == "final"
