"""Core functionality for mdhtml package."""

from .converter import MarkdownConverter, convert_markdown
from .config import (
    Config,
    RenderConfig,
    DEFAULT_CONFIG,
    validate_config,
    validate_render_config,
)
from .extractor import extract_headings, ensure_heading_ids
from .front_matter import FrontMatter, parse_front_matter
from .heading_id import generate_heading_id
from .plugins import PluginRegistry, default_registry
from .renderer import MarkdownRenderer, MdHtmlError, RendererUnavailable
from .toc import build_toc, build_toc_tree, render_toc

__all__ = [
    "MarkdownConverter",
    "convert_markdown",
    "Config",
    "RenderConfig",
    "DEFAULT_CONFIG",
    "validate_config",
    "validate_render_config",
    "extract_headings",
    "ensure_heading_ids",
    "FrontMatter",
    "parse_front_matter",
    "generate_heading_id",
    "PluginRegistry",
    "default_registry",
    "MarkdownRenderer",
    "MdHtmlError",
    "RendererUnavailable",
    "build_toc",
    "build_toc_tree",
    "render_toc",
]
