"""
mdhtml - Markdown → HTML 문서 변환기

Markdown(및 Front Matter)을 목차, 제목 앵커, 구문 강조, 다이어그램 스크립트가
포함된 독립 HTML 문서로 변환하는 패키지입니다.
"""

__version__ = "0.1.0"
__author__ = "mdhtml Team"
__email__ = "mdhtml@example.com"

# Core classes and functions
from .core.converter import MarkdownConverter, convert_markdown
from .core.config import (
    Config,
    RenderConfig,
    DEFAULT_CONFIG,
    validate_config,
    validate_render_config,
)
from .core.extractor import extract_headings, ensure_heading_ids
from .core.front_matter import FrontMatter, parse_front_matter
from .core.heading_id import generate_heading_id
from .core.plugins import PluginRegistry, default_registry
from .core.renderer import MarkdownRenderer, MdHtmlError, RendererUnavailable
from .core.toc import build_toc, build_toc_tree, render_toc

# Data models
from .models.heading import Heading, TocNode, HeadingExtraction

# Utilities
from .utils.format import format_toc_outline, format_heading_stats

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    # Core classes
    "MarkdownConverter",
    "MarkdownRenderer",
    "PluginRegistry",
    "Config",
    "RenderConfig",
    "DEFAULT_CONFIG",
    # Core functions
    "convert_markdown",
    "extract_headings",
    "ensure_heading_ids",
    "generate_heading_id",
    "build_toc",
    "build_toc_tree",
    "render_toc",
    "parse_front_matter",
    "default_registry",
    "validate_config",
    "validate_render_config",
    # Errors
    "MdHtmlError",
    "RendererUnavailable",
    # Data models
    "Heading",
    "TocNode",
    "HeadingExtraction",
    "FrontMatter",
    # Utilities
    "format_toc_outline",
    "format_heading_stats",
]
