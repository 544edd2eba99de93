"""Tests for utils/hashing.py"""

from postdiff.utils.hashing import sha256_hex


class TestSha256Hex:
    def test_known_digest(self):
        assert sha256_hex(b"abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_empty_input(self):
        assert sha256_hex(b"").startswith("e3b0c44298fc1c14")

    def test_lowercase_hex(self):
        digest = sha256_hex(b"\x00\xff")
        assert len(digest) == 64
        assert digest == digest.lower()
