"""
markdown-it 플러그인 레지스트리

렌더러는 이름으로 플러그인을 조회해 설치합니다. 각 플러그인은
`installer(md, config)` 형태의 함수이며, markdown-it 관련 모듈은
설치 시점에 불러옵니다.
"""

import html
import logging
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

    from .config import RenderConfig

# 로깅 설정
logger = logging.getLogger(__name__)

PluginInstaller = Callable[["MarkdownIt", "RenderConfig"], None]


class PluginRegistry:
    """이름 → 플러그인 설치 함수 레지스트리"""

    def __init__(self, installers: Optional[Dict[str, PluginInstaller]] = None):
        self._installers: Dict[str, PluginInstaller] = dict(installers or {})

    def register(self, name: str, installer: PluginInstaller) -> None:
        self._installers[name] = installer

    def unregister(self, name: str) -> None:
        self._installers.pop(name, None)

    def get(self, name: str) -> PluginInstaller:
        return self._installers[name]

    def names(self) -> List[str]:
        return list(self._installers)

    def copy(self) -> "PluginRegistry":
        return PluginRegistry(self._installers)

    def __contains__(self, name: object) -> bool:
        return name in self._installers

    def install(self, name: str, md: "MarkdownIt", config: "RenderConfig") -> bool:
        """
        등록된 플러그인을 설치합니다.

        Returns:
            설치 여부 (등록되지 않은 플러그인이면 False)
        """
        if name not in self._installers:
            logger.debug(f"등록되지 않은 플러그인: {name}")
            return False
        self._installers[name](md, config)
        logger.debug(f"플러그인 설치: {name}")
        return True


def install_checkbox(md: "MarkdownIt", config: "RenderConfig") -> None:
    """`- [ ]` / `- [x]` 목록을 체크박스로 렌더링"""
    from mdit_py_plugins.tasklists import tasklists_plugin

    tasklists_plugin(md)


def install_emoji(md: "MarkdownIt", config: "RenderConfig") -> None:
    """`:smile:` 같은 shortcode를 이모지 문자로 변환"""
    import emoji

    def replace_shortcodes(state) -> None:
        for token in state.tokens:
            if token.type != "inline" or not token.children:
                continue
            for child in token.children:
                if child.type == "text" and ":" in child.content:
                    child.content = emoji.emojize(child.content, language="alias")

    md.core.ruler.push("emoji", replace_shortcodes)


def install_container(md: "MarkdownIt", config: "RenderConfig") -> None:
    """`::: name` 블록을 `<div class="name">`으로 렌더링"""
    from mdit_py_plugins.container import container_plugin

    def validate(params: str, *args) -> bool:
        return bool(params.strip())

    def render(self, tokens, idx, options, env) -> str:
        token = tokens[idx]
        if token.nesting == 1:
            return f'<div class="{html.escape(token.info.strip())}">\n'
        return "</div>\n"

    container_plugin(md, "div", validate=validate, render=render)


def install_plantuml(md: "MarkdownIt", config: "RenderConfig") -> None:
    """`@startuml ... @enduml` 블록을 PlantUML 서버 이미지로 렌더링"""
    from plantuml import deflate_and_encode

    open_marker = config.plantuml_open_marker
    close_marker = config.plantuml_close_marker
    server = config.plantuml_server.rstrip("/")

    def plantuml_block(state, start_line: int, end_line: int, silent: bool) -> bool:
        # 들여쓴 코드 블록은 제외
        if state.sCount[start_line] - state.blkIndent >= 4:
            return False

        start = state.bMarks[start_line] + state.tShift[start_line]
        if not state.src[start : state.eMarks[start_line]].startswith(open_marker):
            return False
        if silent:
            return True

        next_line = start_line + 1
        while next_line < end_line:
            pos = state.bMarks[next_line] + state.tShift[next_line]
            if state.src[pos : state.eMarks[next_line]].startswith(close_marker):
                break
            next_line += 1
        else:
            # 닫는 마커가 없으면 일반 텍스트로 처리
            return False

        token = state.push("plantuml", "img", 0)
        token.block = True
        token.info = open_marker
        token.content = state.getLines(
            start_line + 1, next_line, state.sCount[start_line], True
        )
        token.map = [start_line, next_line + 1]
        state.line = next_line + 1
        return True

    def render_plantuml(self, tokens, idx, options, env) -> str:
        source = f"{open_marker}\n{tokens[idx].content}{close_marker}"
        src = f"{server}/svg/{deflate_and_encode(source)}"
        return f'<img src="{html.escape(src)}" alt="uml diagram">\n'

    md.block.ruler.before(
        "fence",
        "plantuml",
        plantuml_block,
        {"alt": ["paragraph", "reference", "blockquote", "list"]},
    )
    md.add_render_rule("plantuml", render_plantuml)


def default_registry() -> PluginRegistry:
    """기본 플러그인이 등록된 새 레지스트리"""
    return PluginRegistry(
        {
            "checkbox": install_checkbox,
            "emoji": install_emoji,
            "container": install_container,
            "plantuml": install_plantuml,
        }
    )
