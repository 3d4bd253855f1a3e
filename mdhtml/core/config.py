"""
변환 설정 및 환경 구성 관리
"""

import logging
import os
import re
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

# 로깅 설정
logger = logging.getLogger(__name__)

TOC_POSITIONS = ("top", "bottom", "none")

# Front Matter가 덮어쓸 수 있는 설정 키
FRONT_MATTER_KEYS = ("generateToc", "tocDepth", "tocPosition")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_field_name(key: str) -> str:
    """`tocDepth` 같은 camelCase 키를 `toc_depth`로 변환합니다."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class RenderConfig:
    """한 번의 변환에 사용되는 불변 설정"""

    breaks: bool = False
    emoji: bool = True
    highlight: bool = True
    highlight_style: str = "default"
    include_default_styles: bool = True
    mermaid_server: str = "https://unpkg.com/mermaid/dist/mermaid.min.js"
    plantuml_server: str = "http://www.plantuml.com/plantuml"
    plantuml_open_marker: str = "@startuml"
    plantuml_close_marker: str = "@enduml"
    generate_toc: bool = True
    toc_depth: int = 3
    toc_position: str = "top"
    toc_title: str = "목차"

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @staticmethod
    def check_value(name: str, value: Any) -> Optional[str]:
        """
        설정 값 하나를 검사합니다.

        Returns:
            오류 메시지 (유효하면 None)
        """
        expected = _FIELD_TYPES[name]
        # bool은 int의 하위 클래스이므로 따로 거른다
        if expected is int and isinstance(value, bool):
            return f"{name}는 정수여야 합니다: {value!r}"
        if not isinstance(value, expected):
            return f"{name}는 {expected.__name__} 타입이어야 합니다: {value!r}"
        if name == "toc_depth" and not 1 <= value <= 6:
            return f"toc_depth는 1과 6 사이의 값이어야 합니다: {value}"
        if name == "toc_position" and value not in TOC_POSITIONS:
            return f"toc_position은 {', '.join(TOC_POSITIONS)} 중 하나여야 합니다: {value!r}"
        return None

    def validate(self) -> List[str]:
        """설정 유효성 검사"""
        errors = []
        for name in self.field_names():
            error = self.check_value(name, getattr(self, name))
            if error:
                errors.append(error)
        return errors

    def merged(
        self, overrides: Optional[Mapping[str, Any]], strict: bool = True
    ) -> "RenderConfig":
        """
        덮어쓸 값을 적용한 새 설정을 반환합니다. 자신은 변경되지 않습니다.

        Args:
            overrides: camelCase 또는 snake_case 키를 가진 설정 값
            strict: True면 잘못된 값에 ValueError, False면 경고 후 무시

        Returns:
            병합된 RenderConfig
        """
        if not overrides:
            return self

        known = set(self.field_names())
        changes: Dict[str, Any] = {}

        for key, value in overrides.items():
            name = _to_field_name(key)
            if name not in known:
                logger.debug(f"알 수 없는 설정 키 무시: {key}")
                continue

            error = self.check_value(name, value)
            if error:
                if strict:
                    raise ValueError(f"설정 오류: {error}")
                logger.warning(f"잘못된 설정 값을 무시합니다: {error}")
                continue

            changes[name] = value

        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        """camelCase 키를 가진 사전으로 변환합니다."""
        return {
            _to_camel_case(name): getattr(self, name) for name in self.field_names()
        }


_FIELD_TYPES = {f.name: f.type for f in fields(RenderConfig)}

# 프로세스 전체에서 공유하는 읽기 전용 기본 설정
DEFAULT_CONFIG = RenderConfig()


def validate_render_config(config: RenderConfig) -> None:
    """
    변환 설정 유효성 검사 함수

    Args:
        config: RenderConfig 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)


class Config:
    """애플리케이션 설정 클래스"""

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 출력 설정
    OUTPUT_DIR = os.getenv("MDHTML_OUTPUT_DIR", "")
    CSS_FILE = os.getenv("MDHTML_CSS_FILE", "")

    # 목차 및 하이라이트 설정
    TOC_DEPTH = int(os.getenv("MDHTML_TOC_DEPTH", "3"))
    TOC_POSITION = os.getenv("MDHTML_TOC_POSITION", "top")
    HIGHLIGHT_STYLE = os.getenv("MDHTML_HIGHLIGHT_STYLE", "default")

    @property
    def output_dir(self):
        """출력 디렉토리 (비어 있으면 입력 파일과 같은 위치)"""
        return self.OUTPUT_DIR

    @property
    def css_file(self):
        """사용자 CSS 파일 경로"""
        return self.CSS_FILE

    def render_overrides(self) -> Dict[str, Any]:
        """환경 설정 중 변환 설정에 해당하는 값"""
        return {
            "tocDepth": self.TOC_DEPTH,
            "tocPosition": self.TOC_POSITION,
            "highlightStyle": self.HIGHLIGHT_STYLE,
        }

    @classmethod
    def validate(cls):
        """설정 유효성 검사"""
        errors = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            errors.append(f"LOG_LEVEL이 올바르지 않습니다: {cls.LOG_LEVEL}")

        if not 1 <= cls.TOC_DEPTH <= 6:
            errors.append("MDHTML_TOC_DEPTH는 1과 6 사이의 값이어야 합니다.")

        if cls.TOC_POSITION not in TOC_POSITIONS:
            errors.append(
                f"MDHTML_TOC_POSITION은 {', '.join(TOC_POSITIONS)} 중 하나여야 합니다."
            )

        if cls.CSS_FILE and not os.path.isfile(cls.CSS_FILE):
            errors.append(f"MDHTML_CSS_FILE을 찾을 수 없습니다: {cls.CSS_FILE}")

        return errors

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  출력 디렉토리: {cls.OUTPUT_DIR or '(입력 파일 위치)'}")
        print(f"  사용자 CSS: {cls.CSS_FILE or '(없음)'}")
        print(f"  목차 깊이: {cls.TOC_DEPTH}")
        print(f"  목차 위치: {cls.TOC_POSITION}")
        print(f"  하이라이트 스타일: {cls.HIGHLIGHT_STYLE}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
