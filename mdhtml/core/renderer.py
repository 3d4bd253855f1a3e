"""
markdown-it 기반 Markdown → HTML 렌더러
구문 강조, Mermaid 다이어그램, 이미지 경로 처리와 플러그인 설치를 담당합니다.
"""

import html
import logging
import re
from typing import Optional
from urllib.parse import unquote

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_CONFIG, RenderConfig
from .plugins import PluginRegistry, default_registry

# 로깅 설정
logger = logging.getLogger(__name__)

_MERMAID = re.compile(r"\bmermaid\b", re.IGNORECASE)
_QUOTES = re.compile(r"[\"']")


class MdHtmlError(Exception):
    """mdhtml 기본 예외"""


class RendererUnavailable(MdHtmlError):
    """Markdown 렌더러(markdown-it-py)를 사용할 수 없는 경우"""


def _load_markdown_it():
    try:
        from markdown_it import MarkdownIt
    except ImportError as e:
        raise RendererUnavailable(
            "markdown-it-py 라이브러리를 불러올 수 없습니다. "
            "`pip install markdown-it-py`로 설치하세요."
        ) from e
    return MarkdownIt


def _code_block(inner: str) -> str:
    return f'<pre class="hljs"><code><div>{inner}</div></code></pre>'


class MarkdownRenderer:
    """Markdown 본문을 HTML로 렌더링하는 클래스"""

    def __init__(
        self,
        config: RenderConfig = DEFAULT_CONFIG,
        registry: Optional[PluginRegistry] = None,
    ):
        """
        렌더러를 초기화합니다.

        Args:
            config: 변환 설정
            registry: 플러그인 레지스트리 (없으면 기본 플러그인 사용)

        Raises:
            RendererUnavailable: markdown-it-py가 설치되어 있지 않은 경우
        """
        self.config = config
        self.registry = registry if registry is not None else default_registry()
        self._formatter = HtmlFormatter(nowrap=True)
        self._md = self._create_parser()

    def _create_parser(self):
        MarkdownIt = _load_markdown_it()

        md = MarkdownIt(
            "commonmark",
            {"html": True, "breaks": self.config.breaks, "highlight": self.highlight},
        ).enable(["table", "strikethrough"])

        self._install_fence_rule(md)
        self._install_image_rule(md)
        self._load_plugins(md)
        return md

    def highlight(self, code: str, lang: str, attrs: Optional[str] = None) -> str:
        """
        코드 블록에 구문 강조를 적용합니다.

        언어를 알 수 없거나 강조에 실패하면 이스케이프된 일반 텍스트를
        반환합니다.

        Args:
            code: 코드 내용
            lang: 언어 이름
            attrs: 언어 이름 뒤의 추가 속성 (사용하지 않음)

        Returns:
            `<pre class="hljs">` 블록 HTML
        """
        if self.config.highlight and lang:
            try:
                lexer = get_lexer_by_name(lang)
            except ClassNotFound:
                logger.debug(f"지원하지 않는 언어입니다: {lang}")
            else:
                try:
                    return _code_block(
                        pygments_highlight(code, lexer, self._formatter)
                    )
                except Exception as e:
                    logger.error(f"구문 강조 실패 ({lang}): {e}")

        return _code_block(html.escape(code))

    def _install_fence_rule(self, md) -> None:
        """```mermaid 블록은 Mermaid가 처리할 div로 렌더링"""
        default_fence = md.renderer.rules["fence"]

        def render_fence(renderer, tokens, idx, options, env) -> str:
            token = tokens[idx]
            info = token.info.strip() if token.info else ""
            lang = info.split(maxsplit=1)[0] if info else ""
            if lang and _MERMAID.search(lang):
                return f'<div class="mermaid">{html.escape(token.content)}</div>\n'
            return default_fence(tokens, idx, options, env)

        md.add_render_rule("fence", render_fence)

    def _install_image_rule(self, md) -> None:
        """이미지 경로의 URL 인코딩을 풀고 따옴표를 제거"""
        default_image = md.renderer.rules["image"]

        def render_image(renderer, tokens, idx, options, env) -> str:
            token = tokens[idx]
            src = token.attrGet("src")
            if src:
                token.attrSet("src", _QUOTES.sub("", unquote(str(src))))
            return default_image(tokens, idx, options, env)

        md.add_render_rule("image", render_image)

    def _load_plugins(self, md) -> None:
        self.registry.install("checkbox", md, self.config)

        if self.config.emoji:
            self.registry.install("emoji", md, self.config)

        self.registry.install("container", md, self.config)

        if self.config.plantuml_server:
            self.registry.install("plantuml", md, self.config)

    def render(self, body: str) -> str:
        """
        Markdown 본문을 HTML로 렌더링합니다.

        Args:
            body: Markdown 본문 (Front Matter 제외)

        Returns:
            렌더링된 HTML
        """
        return self._md.render(body)
