"""Data models for mdhtml package."""

from .heading import Heading, TocNode, HeadingExtraction

__all__ = ["Heading", "TocNode", "HeadingExtraction"]
