"""
제목 목록으로 중첩된 목차(TOC) HTML을 생성하는 모듈
"""

import html
import logging
from typing import List, Sequence

from ..models.heading import Heading, TocNode

# 로깅 설정
logger = logging.getLogger(__name__)

DEFAULT_TOC_TITLE = "목차"
INDENT = "  "


def build_toc_tree(headings: Sequence[Heading]) -> List[TocNode]:
    """
    평면적인 제목 목록을 계층 트리로 변환합니다.

    각 제목은 자신보다 레벨이 낮은(상위) 가장 가까운 앞 제목의 하위 항목이
    되고, 그런 제목이 없으면 최상위 항목이 됩니다. H1 다음에 바로 H3가
    오더라도 가상의 H2를 만들지 않고 H3를 H1 아래에 둡니다.

    Args:
        headings: 문서 순서대로 정렬된 제목 목록

    Returns:
        최상위 TocNode 목록
    """
    roots: List[TocNode] = []
    stack: List[TocNode] = []

    for heading in headings:
        node = TocNode(heading=heading)

        # 같거나 더 깊은 레벨의 항목은 닫는다
        while stack and stack[-1].level >= heading.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)

    return roots


def _render_items(nodes: Sequence[TocNode], depth: int) -> List[str]:
    indent = INDENT * depth
    lines = []
    for node in nodes:
        heading = node.heading
        lines.append(f'{indent}<li class="toc-item toc-level-{heading.level}">')
        lines.append(
            f'{indent}{INDENT}<a href="#{html.escape(heading.id)}" class="toc-link">'
            f"{html.escape(heading.text)}</a>"
        )
        if node.children:
            # 레벨 차이와 무관하게 하위 목록은 하나만 연다
            lines.append(f'{indent}{INDENT}<ul class="toc-sublist">')
            lines.extend(_render_items(node.children, depth + 2))
            lines.append(f"{indent}{INDENT}</ul>")
        lines.append(f"{indent}</li>")
    return lines


def render_toc(nodes: Sequence[TocNode], title: str = DEFAULT_TOC_TITLE) -> str:
    """
    목차 트리를 HTML로 렌더링합니다.

    Args:
        nodes: 최상위 TocNode 목록
        title: 목차 제목

    Returns:
        목차 HTML (노드가 없으면 빈 문자열)
    """
    if not nodes:
        return ""

    lines = [
        '<div class="table-of-contents">',
        f'{INDENT}<h2 class="toc-title">{html.escape(title)}</h2>',
        f'{INDENT}<ul class="toc-list">',
    ]
    lines.extend(_render_items(nodes, 2))
    lines.append(f"{INDENT}</ul>")
    lines.append("</div>")

    return "\n".join(lines) + "\n"


def build_toc(headings: Sequence[Heading], title: str = DEFAULT_TOC_TITLE) -> str:
    """
    제목 목록으로 목차 HTML을 생성합니다.

    Args:
        headings: 문서 순서대로 정렬된 제목 목록
        title: 목차 제목

    Returns:
        목차 HTML (제목이 없으면 빈 문자열)
    """
    if not headings:
        return ""

    tree = build_toc_tree(headings)
    logger.debug(f"목차 생성: 제목 {len(headings)}개, 최상위 항목 {len(tree)}개")
    return render_toc(tree, title=title)
