"""
HTML 문서에 포함되는 스타일시트와 스크립트
"""

import html
import logging

from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

# 로깅 설정
logger = logging.getLogger(__name__)

FALLBACK_HIGHLIGHT_STYLE = "default"

DEFAULT_STYLES = """<style id="default-markdown-styles">
/* 기본 Markdown 스타일 */
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe WPC', 'Segoe UI', system-ui, 'Ubuntu', 'Droid Sans', sans-serif;
  font-size: 14px;
  line-height: 1.6;
  padding: 0 26px;
  word-wrap: break-word;
}

body > *:first-child {
  margin-top: 0 !important;
}

body > *:last-child {
  margin-bottom: 0 !important;
}

h1, h2, h3, h4, h5, h6 {
  font-weight: 600;
  margin-top: 24px;
  margin-bottom: 16px;
  line-height: 1.25;
}

h1 { font-size: 2em; border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
h2 { font-size: 1.5em; border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
h3 { font-size: 1.25em; }
h4 { font-size: 1em; }
h5 { font-size: 0.875em; }
h6 { font-size: 0.85em; color: #6a737d; }

code {
  font-family: 'Courier New', Courier, monospace;
  background-color: rgba(27,31,35,0.05);
  border-radius: 3px;
  padding: 0.2em 0.4em;
  font-size: 85%;
}

pre {
  background-color: #f6f8fa;
  border-radius: 3px;
  padding: 16px;
  overflow: auto;
  font-size: 85%;
  line-height: 1.45;
}

pre code {
  background-color: transparent;
  padding: 0;
}

blockquote {
  margin: 0;
  padding: 0 1em;
  color: #6a737d;
  border-left: 0.25em solid #dfe2e5;
}

table {
  border-collapse: collapse;
  width: 100%;
  overflow: auto;
}

table th, table td {
  padding: 6px 13px;
  border: 1px solid #dfe2e5;
}

table tr {
  background-color: #fff;
  border-top: 1px solid #c6cbd1;
}

table tr:nth-child(2n) {
  background-color: #f6f8fa;
}

img {
  max-width: 100%;
  box-sizing: content-box;
}

.task-list-item {
  list-style-type: none;
}

.task-list-item-checkbox {
  margin: 0 0.2em 0.25em -1.6em;
  vertical-align: middle;
}

/* 페이지 나누기 */
.page {
  page-break-after: always;
}
</style>"""

TOC_STYLES = """<style id="toc-styles">
/* 목차 컨테이너 */
.table-of-contents {
  background-color: #f8f9fa;
  border: 1px solid #dee2e6;
  border-radius: 6px;
  padding: 20px 25px;
  margin: 25px 0 30px 0;
  box-shadow: 0 2px 4px rgba(0,0,0,0.05);
}

.toc-title {
  font-size: 1.4em;
  font-weight: 700;
  color: #2c3e50;
  margin: 0 0 15px 0;
  padding-bottom: 10px;
  border-bottom: 2px solid #3498db;
}

.toc-list {
  list-style: none;
  margin: 0;
  padding: 0;
  line-height: 1.8;
}

.toc-sublist {
  list-style: none;
  margin: 5px 0;
  padding-left: 20px;
}

.toc-item {
  margin: 5px 0;
  position: relative;
}

.toc-link {
  color: #34495e;
  text-decoration: none;
  display: inline-block;
  padding: 3px 0;
  transition: all 0.2s ease;
  border-left: 3px solid transparent;
  padding-left: 8px;
  margin-left: -8px;
}

.toc-link:hover {
  color: #3498db;
  border-left-color: #3498db;
  padding-left: 12px;
}

/* 레벨별 스타일 */
.toc-level-1 > .toc-link {
  font-weight: 600;
  font-size: 1.05em;
  color: #2c3e50;
}

.toc-level-2 > .toc-link {
  font-weight: 500;
  color: #34495e;
}

.toc-level-3 > .toc-link {
  font-weight: 400;
  color: #5a6c7d;
  font-size: 0.95em;
}

.toc-level-4 > .toc-link,
.toc-level-5 > .toc-link,
.toc-level-6 > .toc-link {
  font-weight: 400;
  color: #6c757d;
  font-size: 0.9em;
}

/* 인쇄 스타일 */
@media print {
  .table-of-contents {
    background-color: white;
    border: 1px solid #333;
    box-shadow: none;
    page-break-after: always;
    margin-bottom: 0;
  }

  .toc-title {
    color: #000;
    border-bottom-color: #333;
  }

  .toc-link {
    color: #000;
  }

  .toc-link:after {
    content: leader('.') target-counter(attr(href), page);
  }

  a[href^="#"] {
    text-decoration: none;
  }
}

html {
  scroll-behavior: smooth;
}

/* 제목 앵커 오프셋 */
h1[id], h2[id], h3[id], h4[id], h5[id], h6[id] {
  scroll-margin-top: 20px;
}
</style>"""

MERMAID_INIT = """<script>
  mermaid.initialize({
    startOnLoad: true,
    theme: document.body.classList.contains('vscode-dark') ||
           document.body.classList.contains('vscode-high-contrast')
      ? 'dark'
      : 'default'
  });
</script>"""


def get_default_styles() -> str:
    """기본 Markdown 스타일"""
    return DEFAULT_STYLES


def get_toc_styles() -> str:
    """목차 스타일"""
    return TOC_STYLES


def get_highlight_styles(style_name: str) -> str:
    """
    Pygments 스타일로 구문 강조 CSS를 생성합니다.

    Args:
        style_name: Pygments 스타일 이름 (알 수 없으면 기본 스타일 사용)

    Returns:
        `.hljs` 범위의 `<style>` 블록
    """
    style = style_name or FALLBACK_HIGHLIGHT_STYLE
    try:
        formatter = HtmlFormatter(style=style)
    except ClassNotFound:
        logger.warning(
            f"알 수 없는 하이라이트 스타일입니다: {style}. "
            f"'{FALLBACK_HIGHLIGHT_STYLE}' 스타일을 사용합니다."
        )
        style = FALLBACK_HIGHLIGHT_STYLE
        formatter = HtmlFormatter(style=style)

    css = formatter.get_style_defs(".hljs")
    return f'<style id="highlight-styles" data-style="{html.escape(style)}">\n{css}\n</style>'


def get_custom_styles(css: str) -> str:
    """사용자 CSS"""
    return f"\n<style>\n{css}\n</style>\n"


def get_mermaid_script(server: str) -> str:
    """
    Mermaid 스크립트 태그 (server가 비어 있으면 빈 문자열)
    """
    if not server:
        return ""
    return f'<script src="{html.escape(server)}"></script>\n{MERMAID_INIT}'
