"""
목차 트리와 제목 목록을 터미널 출력용 텍스트로 포맷팅하는 유틸리티
"""

from collections import Counter
from typing import List, Sequence

from ..models.heading import Heading, TocNode


def format_toc_outline(nodes: Sequence[TocNode], show_ids: bool = True) -> str:
    """
    목차 트리를 들여쓴 개요 형태로 포맷팅합니다.

    Args:
        nodes: 최상위 TocNode 목록
        show_ids: 앵커 ID 표시 여부

    Returns:
        포맷팅된 개요
    """
    if not nodes:
        return "제목 없음"

    lines: List[str] = []

    def walk(node: TocNode, depth: int) -> None:
        heading = node.heading
        indent = "  " * depth
        line = f"{indent}├─ H{heading.level} {heading.text}"
        if show_ids:
            line += f"  (#{heading.id})"
        lines.append(line)
        for child in node.children:
            walk(child, depth + 1)

    for node in nodes:
        walk(node, 0)

    return "\n".join(lines)


def format_heading_stats(headings: Sequence[Heading]) -> str:
    """
    레벨별 제목 개수와 중복 ID를 요약합니다.

    Args:
        headings: 제목 목록

    Returns:
        요약 문자열
    """
    if not headings:
        return "📊 제목 0개"

    levels = Counter(heading.level for heading in headings)
    parts = [f"H{level}: {levels[level]}" for level in sorted(levels)]
    result = f"📊 제목 {len(headings)}개 ({', '.join(parts)})"

    # ID 충돌은 해결하지 않고 알려주기만 한다
    duplicates = sorted(
        heading_id
        for heading_id, count in Counter(h.id for h in headings).items()
        if count > 1
    )
    if duplicates:
        result += f"\n⚠️  중복 앵커 ID: {', '.join(duplicates)}"

    return result
