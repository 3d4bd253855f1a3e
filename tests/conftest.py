"""Shared fixtures for mdhtml tests."""

import pytest

from mdhtml.core.converter import MarkdownConverter
from mdhtml.models.heading import Heading


@pytest.fixture
def converter():
    return MarkdownConverter()


@pytest.fixture
def make_headings():
    """Build a heading sequence from (level, text) pairs."""

    def _make(*pairs):
        return [
            Heading(level=level, text=text, id=text.lower(), source_order=order)
            for order, (level, text) in enumerate(pairs)
        ]

    return _make


@pytest.fixture
def sample_markdown():
    return "\n".join(
        [
            "# Intro",
            "",
            "Some text.",
            "",
            "## Background",
            "",
            "## Motivation",
            "",
            "# Conclusion",
            "",
            "The end.",
        ]
    )
