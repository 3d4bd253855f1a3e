"""Utility functions for mdhtml package."""

from .format import format_toc_outline, format_heading_stats

__all__ = ["format_toc_outline", "format_heading_stats"]
