"""Tests for models.py"""

from __future__ import annotations

import dataclasses

import pytest

from postdiff.models import (
    NOT_PRESENT,
    AuthorsDelta,
    BlobBody,
    DeltaOp,
    HeaderDelta,
    InlineBody,
    Part,
    PartDelta,
    PostEvent,
    PostEventActorType,
    PostEventType,
    PostFilter,
    Revision,
    StringListFilterMode,
)
from postdiff.utils.hashing import sha256_hex


class TestDeltaOp:
    def test_wire_values(self):
        assert [op.value for op in DeltaOp] == ["add", "rm", "up", "mv", "mvup"]

    def test_str_comparison(self):
        assert DeltaOp.MOVE_UPDATE == "mvup"

    def test_not_present_sentinel(self):
        assert NOT_PRESENT == -1


class TestPartBody:
    def test_default_body_is_empty_inline(self):
        part = Part(id="a")
        assert part.inline
        assert part.text == ""
        assert part.sha256 == ""

    def test_inline_text_decoding(self):
        part = Part(id="a", body=InlineBody("naïve".encode("utf-8")))
        assert part.text == "naïve"

    def test_invalid_utf8_replaced(self):
        assert InlineBody(b"ok\xff").text == "ok�"

    def test_blob_part(self):
        part = Part(id="img", body=BlobBody("abc"))
        assert not part.inline
        assert part.sha256 == "abc"
        assert part.text == ""

    def test_blob_from_bytes(self):
        assert BlobBody.from_bytes(b"data") == BlobBody(sha256_hex(b"data"))

    def test_inline_and_blob_never_equal(self):
        assert InlineBody(b"") != BlobBody("")


class TestDeltasFrozen:
    def test_part_delta_immutable(self):
        delta = PartDelta(part_id="a", op=DeltaOp.ADD, from_position=-1, to_position=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            delta.op = DeltaOp.REMOVE  # type: ignore[misc]

    def test_revision_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Revision().title_delta = "x"  # type: ignore[misc]

    def test_part_delta_headers_read_only(self):
        value_deltas = [HeaderDelta(DeltaOp.ADD, "X", NOT_PRESENT, 0, "v")]
        source = {"X": value_deltas}
        delta = PartDelta("p", DeltaOp.UPDATE, 0, 0, headers=source)
        source["Y"] = []
        value_deltas.append(HeaderDelta(DeltaOp.ADD, "X", NOT_PRESENT, 1, "w"))
        assert list(delta.headers) == ["X"]
        assert len(delta.headers["X"]) == 1
        with pytest.raises(TypeError):
            delta.headers["Z"] = ()  # type: ignore[index]

    def test_part_delta_hashable(self):
        headers = {"X": [HeaderDelta(DeltaOp.ADD, "X", NOT_PRESENT, 0, "v")]}
        first = PartDelta("p", DeltaOp.UPDATE, 0, 0, headers=headers, body="=1")
        second = PartDelta("p", DeltaOp.UPDATE, 0, 0, headers=dict(headers), body="=1")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_revision_hashable(self):
        revision = Revision(
            id="r",
            parts_deltas=(PartDelta("p", DeltaOp.REMOVE, 0, NOT_PRESENT, body="-3"),),
        )
        assert hash(revision) == hash(dataclasses.replace(revision))


class TestToDict:
    def test_authors_delta(self):
        assert AuthorsDelta(DeltaOp.ADD, NOT_PRESENT, 0, "alice").to_dict() == {
            "op": "add",
            "from_position": -1,
            "to_position": 0,
            "value": "alice",
        }

    def test_part_delta_with_headers(self):
        delta = PartDelta(
            part_id="p",
            op=DeltaOp.UPDATE,
            from_position=0,
            to_position=0,
            headers={"X": [HeaderDelta(DeltaOp.ADD, "X", NOT_PRESENT, 0, "v")]},
            body="=3",
        )
        data = delta.to_dict()
        assert data["op"] == "up"
        assert data["headers"] == {
            "X": [{"op": "add", "header": "X", "from_position": -1, "to_position": 0, "value": "v"}],
        }
        assert data["body"] == "=3"
        assert data["sha256_from"] == data["sha256_to"] == ""


class TestRevisionIsEmpty:
    def test_default_is_empty(self):
        assert Revision().is_empty()

    def test_title_only(self):
        assert not Revision(title_delta="+x").is_empty()

    def test_caller_fields_do_not_count(self):
        assert Revision(public=True, reason="typo").is_empty()


class TestPostFilterIsEmpty:
    def test_default(self):
        assert PostFilter().is_empty()

    def test_mode_alone_is_still_empty(self):
        assert PostFilter(authors_mode=StringListFilterMode.EXACT).is_empty()

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"slug": "x"},
            {"authors": ["a"]},
            {"draft": False},
            {"streams": ["s"]},
        ],
    )
    def test_any_criterion(self, kwargs):
        assert not PostFilter(**kwargs).is_empty()


class TestPostEvent:
    def test_defaults(self):
        event = PostEvent(id="e1", type=PostEventType.PUBLISHED)
        assert event.actor_type == PostEventActorType.USER
        assert event.timestamp is None
        assert event.type.value == "published"
