"""
렌더링된 HTML에서 제목을 찾아 앵커 ID를 부여하고 문서 순서대로 추출하는 모듈
"""

import logging
from typing import List

from bs4 import BeautifulSoup

from ..models.heading import Heading, HeadingExtraction
from .heading_id import generate_heading_id

# 로깅 설정
logger = logging.getLogger(__name__)

MAX_HEADING_LEVEL = 6
HEADING_TAGS = [f"h{level}" for level in range(1, MAX_HEADING_LEVEL + 1)]


def _parse(content: str) -> BeautifulSoup:
    return BeautifulSoup(content, "html.parser")


def _assign_missing_id(element) -> str:
    """ID가 없는 제목 요소에 ID를 기록하고, 요소의 ID를 반환합니다."""
    if not element.get("id"):
        element["id"] = generate_heading_id(element.get_text())
        logger.debug(f"제목 ID 생성: {element['id']}")
    return element["id"]


def extract_headings(content: str, max_depth: int = 3) -> HeadingExtraction:
    """
    HTML 콘텐츠에서 제목을 추출합니다.

    레벨 1부터 `max_depth`까지 제목을 찾아 ID가 없는 제목에 ID를 부여한 뒤,
    전체 제목을 문서에 나타나는 순서대로 정렬합니다. 이미 ID가 있는 제목은
    건드리지 않으므로 같은 콘텐츠에 여러 번 적용해도 결과가 같습니다.

    Args:
        content: 렌더링된 HTML 콘텐츠
        max_depth: 추출할 최대 제목 레벨 (1-6)

    Returns:
        ID가 기록된 콘텐츠와 제목 목록
    """
    if max_depth < 1:
        return HeadingExtraction(content=content, headings=[])

    soup = _parse(content)
    found = []

    for level in range(1, min(max_depth, MAX_HEADING_LEVEL) + 1):
        for element in soup.find_all(f"h{level}"):
            heading_id = _assign_missing_id(element)
            found.append((element, level, heading_id))

    if not found:
        return HeadingExtraction(content=content, headings=[])

    # 레벨별 탐색 순서가 아닌 문서 순서로 정렬
    positions = {id(el): pos for pos, el in enumerate(soup.find_all(HEADING_TAGS))}
    found.sort(key=lambda item: positions[id(item[0])])

    headings: List[Heading] = [
        Heading(
            level=level,
            text=element.get_text().strip(),
            id=heading_id,
            source_order=order,
        )
        for order, (element, level, heading_id) in enumerate(found)
    ]

    logger.debug(f"{len(headings)}개의 제목을 추출했습니다. (최대 레벨 {max_depth})")
    return HeadingExtraction(content=str(soup), headings=headings)


def ensure_heading_ids(content: str, max_depth: int = MAX_HEADING_LEVEL) -> str:
    """
    목차 없이 앵커만 필요할 때 제목에 ID만 부여합니다.

    Args:
        content: 렌더링된 HTML 콘텐츠
        max_depth: ID를 부여할 최대 제목 레벨

    Returns:
        ID가 기록된 HTML 콘텐츠
    """
    if max_depth < 1:
        return content

    soup = _parse(content)
    for level in range(1, min(max_depth, MAX_HEADING_LEVEL) + 1):
        for element in soup.find_all(f"h{level}"):
            _assign_missing_id(element)

    return str(soup)
