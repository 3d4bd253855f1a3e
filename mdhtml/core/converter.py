"""
Markdown 문서를 목차가 포함된 독립 HTML 문서로 변환하는 모듈
Front Matter 해석, 렌더링, 목차 삽입, 스타일 구성을 차례로 수행합니다.
"""

import html
import logging
from typing import Any, Dict, Mapping, Optional, Union

from .config import (
    DEFAULT_CONFIG,
    FRONT_MATTER_KEYS,
    RenderConfig,
    validate_render_config,
)
from .extractor import MAX_HEADING_LEVEL, ensure_heading_ids, extract_headings
from .front_matter import FrontMatter, parse_front_matter
from .plugins import PluginRegistry, default_registry
from .renderer import MarkdownRenderer
from .styles import (
    get_custom_styles,
    get_default_styles,
    get_highlight_styles,
    get_mermaid_script,
    get_toc_styles,
)
from .toc import build_toc

# 로깅 설정
logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Converted Document"

ConfigLike = Union[RenderConfig, Mapping[str, Any], None]


class MarkdownConverter:
    """Markdown → HTML 변환을 처리하는 메인 클래스"""

    def __init__(
        self,
        default_config: RenderConfig = DEFAULT_CONFIG,
        registry: Optional[PluginRegistry] = None,
    ):
        """
        변환기를 초기화합니다.

        Args:
            default_config: 기본 설정 (변경되지 않음)
            registry: markdown-it 플러그인 레지스트리
        """
        self.default_config = default_config
        self.registry = registry if registry is not None else default_registry()

        logger.debug(f"변환기 초기화: 플러그인={', '.join(self.registry.names())}")

    def resolve_config(
        self, config: ConfigLike, front_matter: Mapping[str, Any]
    ) -> RenderConfig:
        """
        기본 설정 < 호출자 설정 < Front Matter 순으로 설정을 병합합니다.

        Front Matter는 generateToc, tocDepth, tocPosition만 덮어쓸 수 있고,
        잘못된 값은 경고 후 무시됩니다.

        Raises:
            ValueError: 호출자 설정 값이 잘못된 경우
        """
        if isinstance(config, RenderConfig):
            validate_render_config(config)
            merged = config
        else:
            merged = self.default_config.merged(config)

        overrides = {
            key: front_matter[key] for key in FRONT_MATTER_KEYS if key in front_matter
        }
        return merged.merged(overrides, strict=False)

    @staticmethod
    def _document_overrides(front_matter: Mapping[str, Any]) -> Dict[str, Any]:
        """렌더링에만 적용되는 문서별 설정 (breaks, emoji, PlantUML 마커)"""
        overrides = {
            key: front_matter[key] for key in ("breaks", "emoji") if key in front_matter
        }
        for key in ("plantumlOpenMarker", "plantumlCloseMarker"):
            if front_matter.get(key):
                overrides[key] = front_matter[key]
        return overrides

    def convert(
        self,
        markdown: str,
        css: Optional[str] = None,
        title: Optional[str] = None,
        config: ConfigLike = None,
    ) -> str:
        """
        Markdown 텍스트를 완전한 HTML 문서로 변환합니다.

        Args:
            markdown: Markdown 텍스트 (Front Matter 포함 가능)
            css: 사용자 CSS
            title: 문서 제목
            config: 설정 (RenderConfig 또는 camelCase 키 사전)

        Returns:
            HTML 문서 문자열

        Raises:
            RendererUnavailable: markdown-it-py를 사용할 수 없는 경우
        """
        try:
            matter = parse_front_matter(markdown)
            effective = self.resolve_config(config, matter.data)

            content = self.render_markdown(matter, effective)
            content = self.apply_toc(content, effective)

            document_title = title or matter.data.get("title") or DEFAULT_TITLE

            return self.make_html(
                title=str(document_title),
                content=content,
                css=css or "",
                config=effective,
            )

        except Exception as e:
            logger.error(f"변환 실패: {e}")
            raise

    def render_markdown(self, matter: FrontMatter, config: RenderConfig) -> str:
        """Front Matter를 제외한 본문을 HTML로 렌더링합니다."""
        render_config = config.merged(
            self._document_overrides(matter.data), strict=False
        )
        renderer = MarkdownRenderer(render_config, self.registry)
        return renderer.render(matter.content)

    def apply_toc(self, content: str, config: RenderConfig) -> str:
        """
        설정에 따라 제목 ID를 부여하고 목차를 삽입합니다.

        Args:
            content: 렌더링된 HTML
            config: 병합된 설정

        Returns:
            제목 ID와 목차가 반영된 HTML
        """
        if not config.generate_toc:
            return content

        # 목차를 표시하지 않아도 앵커 이동을 위해 ID는 부여한다
        content = ensure_heading_ids(content, MAX_HEADING_LEVEL)
        if config.toc_position == "none":
            return content

        extraction = extract_headings(content, config.toc_depth)
        if not extraction.headings:
            return extraction.content

        toc_html = build_toc(extraction.headings, title=config.toc_title)
        logger.info(
            f"목차 생성: 제목 {len(extraction.headings)}개 "
            f"(깊이 {config.toc_depth}, 위치 {config.toc_position})"
        )

        if config.toc_position == "top":
            return toc_html + "\n" + extraction.content
        return extraction.content + "\n" + toc_html

    @staticmethod
    def build_styles(config: RenderConfig, css: str = "") -> str:
        """문서에 포함할 스타일 블록을 구성합니다."""
        styles = ""

        if config.include_default_styles:
            styles += get_default_styles()

        if config.generate_toc and config.toc_position != "none":
            styles += get_toc_styles()

        if config.highlight:
            styles += get_highlight_styles(config.highlight_style)

        if css:
            styles += get_custom_styles(css)

        return styles

    def make_html(
        self, title: str, content: str, css: str, config: RenderConfig
    ) -> str:
        """완전한 HTML 페이지를 생성합니다."""
        styles = self.build_styles(config, css)
        mermaid_script = get_mermaid_script(config.mermaid_server)

        return f"""<!DOCTYPE html>
<html>
<head>
<title>{html.escape(title)}</title>
<meta http-equiv="Content-type" content="text/html;charset=UTF-8">
{styles}
{mermaid_script}
</head>
<body>
{content}
</body>
</html>"""


def convert_markdown(
    markdown: str,
    css: Optional[str] = None,
    title: Optional[str] = None,
    config: ConfigLike = None,
) -> str:
    """기본 설정의 변환기로 Markdown을 HTML 문서로 변환합니다."""
    return MarkdownConverter().convert(markdown, css=css, title=title, config=config)
