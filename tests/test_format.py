"""Tests for outline formatting utilities."""

from mdhtml.core.toc import build_toc_tree
from mdhtml.utils.format import format_heading_stats, format_toc_outline


def test_outline_empty():
    assert format_toc_outline([]) == "제목 없음"


def test_outline_indents_children(make_headings):
    tree = build_toc_tree(make_headings((1, "Intro"), (3, "Detail"), (1, "End")))

    assert format_toc_outline(tree).splitlines() == [
        "├─ H1 Intro  (#intro)",
        "  ├─ H3 Detail  (#detail)",
        "├─ H1 End  (#end)",
    ]


def test_outline_without_ids(make_headings):
    tree = build_toc_tree(make_headings((2, "Only")))
    assert format_toc_outline(tree, show_ids=False) == "├─ H2 Only"


def test_stats_counts_levels(make_headings):
    stats = format_heading_stats(make_headings((1, "A"), (2, "B"), (2, "C")))
    assert stats == "📊 제목 3개 (H1: 1, H2: 2)"


def test_stats_reports_duplicate_ids(make_headings):
    stats = format_heading_stats(make_headings((1, "Intro"), (1, "Intro")))
    assert "중복 앵커 ID: intro" in stats


def test_stats_empty():
    assert format_heading_stats([]) == "📊 제목 0개"
