"""
Markdown 문서 앞부분의 Front Matter(--- 로 둘러싼 key: value 블록) 해석
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict

from frontmatter.default_handlers import YAMLHandler

# 로깅 설정
logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[0-9]+")
# 닫는 구분자 뒤에는 반드시 줄바꿈이 와야 한다
_CLOSED_BLOCK = re.compile(
    r"-{3,}[ \t]*\r?\n.*?^-{3,}[ \t]*\r?\n", re.DOTALL | re.MULTILINE
)


class KeyValueHandler(YAMLHandler):
    """
    `key: value` 줄만 해석하는 단순한 Front Matter 핸들러

    구분자 처리는 YAMLHandler를 따르되 닫는 구분자 뒤 줄바꿈을 요구하고,
    본문 해석만 바꿉니다.
    `true`/`false`는 불리언, 숫자만으로 된 값은 정수, 나머지는 문자열입니다.
    """

    def split(self, text: str):
        fm, content = super().split(text)
        if not _CLOSED_BLOCK.match(text):
            raise ValueError("closing delimiter is not followed by a newline")
        return fm, content

    def load(self, fm: str, **kwargs: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for line in fm.splitlines():
            colon_index = line.find(":")
            if colon_index <= 0:
                continue
            key = line[:colon_index].strip()
            value = line[colon_index + 1 :].strip()
            data[key] = _convert_value(value)
        return data


def _convert_value(value: str) -> Any:
    if value == "true":
        return True
    if value == "false":
        return False
    if _INTEGER.fullmatch(value):
        return int(value)
    return value


@dataclass
class FrontMatter:
    """Front Matter 해석 결과"""

    data: Dict[str, Any] = field(default_factory=dict)
    content: str = ""


def parse_front_matter(text: str) -> FrontMatter:
    """
    Front Matter를 분리하고 해석합니다.

    Front Matter가 없거나 닫는 구분자가 없으면 빈 메타데이터와 함께
    전체 텍스트를 본문으로 반환합니다.

    Args:
        text: Markdown 텍스트

    Returns:
        메타데이터와 본문
    """
    handler = KeyValueHandler()

    if not handler.detect(text):
        return FrontMatter(data={}, content=text)

    try:
        fm, content = handler.split(text)
    except ValueError:
        logger.warning("Front Matter 닫는 구분자(---)가 없습니다. 전체를 본문으로 처리합니다.")
        return FrontMatter(data={}, content=text)

    data = handler.load(fm)

    logger.debug(f"Front Matter 키: {', '.join(data) or '(없음)'}")
    return FrontMatter(data=data, content=content.lstrip("\r\n"))
