"""Heading and TOC tree data models."""

from typing import List
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Heading:
    """문서에서 추출한 제목 하나를 나타내는 데이터 클래스"""

    level: int
    text: str
    id: str
    source_order: int


@dataclass
class TocNode:
    """목차 트리의 노드 (제목과 하위 노드 목록)"""

    heading: Heading
    children: List["TocNode"] = field(default_factory=list)

    @property
    def level(self) -> int:
        return self.heading.level


@dataclass
class HeadingExtraction:
    """ID가 기록된 콘텐츠와 문서 순서대로 정렬된 제목 목록"""

    content: str
    headings: List[Heading]
