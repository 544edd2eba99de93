"""Shared test fixtures for the postdiff test suite."""

from __future__ import annotations

import pytest
from diff_match_patch import diff_match_patch

from postdiff.config import PostdiffConfig
from postdiff.diff.revision import RevisionGenerator
from postdiff.diff.text_delta import TextDeltaCodec


@pytest.fixture
def config() -> PostdiffConfig:
    """Default configuration."""
    return PostdiffConfig()


@pytest.fixture
def generator(config: PostdiffConfig) -> RevisionGenerator:
    """Revision generator using the default config."""
    return RevisionGenerator(config)


@pytest.fixture
def codec() -> TextDeltaCodec:
    """Text delta codec with default settings."""
    return TextDeltaCodec()


@pytest.fixture
def apply_delta():
    """Rebuild the new text from an old text and a delta.

    The empty delta means "unchanged" and returns *old* as is.
    """
    dmp = diff_match_patch()

    def _apply(old: str, delta: str) -> str:
        if not delta:
            return old
        return dmp.diff_text2(dmp.diff_fromDelta(old, delta))

    return _apply
