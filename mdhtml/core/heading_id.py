"""
제목 텍스트로부터 URL에 안전한 앵커 ID를 생성하는 모듈
"""

import re

from nanoid import generate

# 단어 문자(한글, 한자 등 모든 문자 포함), 공백, 하이픈 외에는 제거
_DISALLOWED_CHARS = re.compile(r"[^\w\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

FALLBACK_PREFIX = "heading-"
FALLBACK_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
FALLBACK_LENGTH = 9


def generate_heading_id(text: str) -> str:
    """
    제목 텍스트로 앵커 ID를 생성합니다.

    특수문자를 제거하고 공백을 하이픈으로 바꾼 뒤 ASCII 문자만 소문자로
    변환합니다. 결과가 비어 있으면 `heading-` 뒤에 무작위 base36 문자
    9개를 붙인 ID를 반환합니다.

    Args:
        text: 제목 텍스트

    Returns:
        앵커 ID
    """
    heading_id = (text or "").strip()
    heading_id = _DISALLOWED_CHARS.sub("", heading_id)
    heading_id = _WHITESPACE_RUN.sub("-", heading_id)
    heading_id = heading_id.translate(_ASCII_LOWER)

    if not heading_id:
        heading_id = random_heading_id()

    return heading_id


def random_heading_id() -> str:
    """비어 있는 제목을 위한 무작위 ID"""
    return FALLBACK_PREFIX + generate(FALLBACK_ALPHABET, FALLBACK_LENGTH)
