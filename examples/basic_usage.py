#!/usr/bin/env python3
"""
mdhtml 패키지 기본 사용 예제

이 예제는 mdhtml을 Python 라이브러리로 사용하는 방법을 보여줍니다.
"""

from pathlib import Path

from mdhtml import (
    MarkdownConverter,
    RenderConfig,
    build_toc_tree,
    extract_headings,
    format_toc_outline,
    generate_heading_id,
)

SAMPLE = """---
tocDepth: 2
tocPosition: top
---
# 소개

본문입니다. :rocket:

## 설치

```python
print("hello")
```

## 사용법

- [x] 변환
- [ ] 배포

# 부록
"""


def main():
    """기본 사용 예제"""
    print("📚 mdhtml 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 제목 ID 생성
    print("\n🔗 제목 ID 생성")
    for text in ["Hello World", "설치 방법", "中文标题", "!!!"]:
        print(f"   {text!r} -> {generate_heading_id(text)}")

    # 2. 문서 변환
    print("\n📖 문서 변환")
    converter = MarkdownConverter()
    document = converter.convert(
        SAMPLE,
        title="예제 문서",
        config=RenderConfig(highlight_style="friendly"),
    )

    output = Path("example.html")
    output.write_text(document, encoding="utf-8")
    print(f"✅ HTML 저장: {output} ({len(document):,}자)")

    # 3. 렌더링된 HTML에서 목차 구조 확인
    print("\n🧭 목차 구조")
    extraction = extract_headings(
        "<h1>소개</h1><h2>설치</h2><h4>세부 사항</h4><h1>부록</h1>", max_depth=6
    )
    print(format_toc_outline(build_toc_tree(extraction.headings)))


if __name__ == "__main__":
    main()
