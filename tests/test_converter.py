"""Tests for full document assembly."""

import re
import sys

import pytest
from bs4 import BeautifulSoup

from mdhtml.core.config import RenderConfig
from mdhtml.core.converter import DEFAULT_TITLE, MarkdownConverter, convert_markdown
from mdhtml.core.renderer import RendererUnavailable

TOC_MARKER = '<div class="table-of-contents">'


def _body(document):
    return document.split("<body>", 1)[1]


# --- TOC placement ---

@pytest.mark.parametrize(
    "generate_toc, position, has_toc, has_ids",
    [
        (True, "top", True, True),
        (True, "bottom", True, True),
        (True, "none", False, True),
        (False, "top", False, False),
        (False, "bottom", False, False),
        (False, "none", False, False),
    ],
)
def test_toc_and_anchor_combinations(converter, generate_toc, position, has_toc, has_ids):
    document = converter.convert(
        "# Title\n\nBody\n\n## Section",
        config={"generateToc": generate_toc, "tocPosition": position},
    )
    body = _body(document)

    assert (TOC_MARKER in body) is has_toc
    assert ('<h1 id="title">Title</h1>' in body) is has_ids
    assert ('<h2 id="section">Section</h2>' in body) is has_ids
    if not has_ids:
        assert "<h1>Title</h1>" in body


def test_toc_top_precedes_content(converter):
    body = _body(converter.convert("# Title\n\nBody", config={"tocPosition": "top"}))
    assert body.index(TOC_MARKER) < body.index('<h1 id="title">')


def test_toc_bottom_follows_content(converter):
    body = _body(converter.convert("# Title\n\nBody", config={"tocPosition": "bottom"}))
    assert body.index('<h1 id="title">') < body.index(TOC_MARKER)


def test_toc_styles_only_when_toc_shown(converter):
    shown = converter.convert("# A", config={"tocPosition": "top"})
    hidden = converter.convert("# A", config={"tocPosition": "none"})

    assert 'id="toc-styles"' in shown
    assert 'id="toc-styles"' not in hidden


def test_no_headings_no_toc(converter):
    assert TOC_MARKER not in converter.convert("Just a paragraph.")


def test_intro_scenario(converter, sample_markdown):
    body = _body(converter.convert(sample_markdown))
    soup = BeautifulSoup(body, "html.parser")
    toc = soup.find("div", class_="table-of-contents")

    top_items = toc.find("ul", class_="toc-list").find_all("li", recursive=False)
    assert [li.a["href"] for li in top_items] == ["#intro", "#conclusion"]
    assert len(toc.find_all("ul", class_="toc-sublist")) == 1
    assert [a.get_text() for a in toc.find_all("a")] == [
        "Intro",
        "Background",
        "Motivation",
        "Conclusion",
    ]


def test_toc_depth_bounds_toc_but_not_anchors(converter):
    body = _body(converter.convert("# A\n\n## B\n\n### C", config={"tocDepth": 2}))

    assert "toc-level-2" in body
    assert "toc-level-3" not in body
    assert '<h3 id="c">C</h3>' in body


def test_duplicate_headings_share_anchor(converter):
    body = _body(converter.convert("# Introduction\n\n# Introduction"))
    assert body.count('href="#introduction"') == 2
    assert body.count('id="introduction"') == 2


# --- Front matter ---

def test_front_matter_disables_toc(converter):
    document = converter.convert("---\ngenerateToc: false\n---\n# Title\nBody")
    body = _body(document)

    assert TOC_MARKER not in body
    assert "<h1>Title</h1>" in body
    assert "generateToc" not in body


def test_front_matter_overrides_caller_config(converter):
    document = converter.convert(
        "---\ntocPosition: bottom\ntocDepth: 1\n---\n# A\n\n## B",
        config={"tocPosition": "none", "tocDepth": 3},
    )
    body = _body(document)

    assert body.index('<h1 id="a">') < body.index(TOC_MARKER)
    assert "toc-level-2" not in body


def test_invalid_front_matter_value_is_ignored(converter):
    body = _body(converter.convert("---\ntocDepth: 9\ntocPosition: left\n---\n# A\n\n### C"))

    assert TOC_MARKER in body
    assert "toc-level-3" in body


def test_front_matter_render_switches(converter):
    body = _body(converter.convert("---\nbreaks: true\nemoji: false\n---\na\nb :smile:"))

    assert "<br" in body
    assert ":smile:" in body


def test_front_matter_cannot_override_other_config(converter):
    document = converter.convert("---\nincludeDefaultStyles: false\n---\n# A")
    assert 'id="default-markdown-styles"' in document


def test_malformed_front_matter_is_body(converter):
    document = converter.convert("---\ntitle: draft\n# No closing delimiter")

    assert "No closing delimiter" in document
    assert "<title>Converted Document</title>" in document


# --- Envelope ---

def test_document_envelope(converter):
    document = converter.convert("# A")

    assert document.startswith("<!DOCTYPE html>")
    assert '<meta http-equiv="Content-type" content="text/html;charset=UTF-8">' in document
    assert document.rstrip().endswith("</html>")
    assert f"<title>{DEFAULT_TITLE}</title>" in document


def test_title_is_escaped(converter):
    document = converter.convert("# A", title="<script>")

    assert "<title>&lt;script&gt;</title>" in document
    assert "<title><script></title>" not in document


def test_title_from_front_matter(converter):
    assert "<title>Release Notes</title>" in converter.convert("---\ntitle: Release Notes\n---\n# A")
    assert "<title>Given</title>" in converter.convert(
        "---\ntitle: Release Notes\n---\n# A", title="Given"
    )


def test_custom_css_is_last_style(converter):
    document = converter.convert("# A", css="body { color: red; }")
    head = document.split("</head>", 1)[0]

    assert "body { color: red; }" in head
    assert head.rindex("<style") == head.index("<style>\nbody { color: red; }")


def test_style_switches(converter):
    document = converter.convert(
        "# A", config={"includeDefaultStyles": False, "highlight": False}
    )

    assert 'id="default-markdown-styles"' not in document
    assert 'id="highlight-styles"' not in document


def test_highlight_style_css(converter):
    document = converter.convert("# A", config={"highlightStyle": "monokai"})
    assert 'data-style="monokai"' in document


def test_unknown_highlight_style_falls_back(converter, caplog):
    document = converter.convert("# A", config={"highlightStyle": "no-such-style"})

    assert 'data-style="default"' in document
    assert "no-such-style" in caplog.text


def test_mermaid_script(converter):
    assert "mermaid.min.js" in converter.convert("# A")
    assert "<script" not in converter.convert("# A", config={"mermaidServer": ""})


def test_render_config_instance_is_used_as_is(converter):
    config = RenderConfig(generate_toc=False, include_default_styles=False)
    document = converter.convert("# A", config=config)

    assert TOC_MARKER not in document
    assert 'id="default-markdown-styles"' not in document


# --- Errors ---

def test_invalid_caller_config_raises(converter):
    with pytest.raises(ValueError):
        converter.convert("# A", config={"tocPosition": "sideways"})


def test_invalid_config_instance_raises(converter):
    with pytest.raises(ValueError):
        converter.convert("# A", config=RenderConfig(toc_position="sideways"))

    with pytest.raises(ValueError):
        convert_markdown("# A", config=RenderConfig(toc_depth=0))


def test_renderer_unavailable(converter, monkeypatch):
    monkeypatch.setitem(sys.modules, "markdown_it", None)

    with pytest.raises(RendererUnavailable):
        converter.convert("# A")


def test_conversion_is_repeatable():
    first = convert_markdown("# A\n\n## B")
    second = convert_markdown("# A\n\n## B")

    assert first == second
    assert len(re.findall(r'id="a"', first)) == 1


def test_default_config_untouched(converter):
    converter.convert("---\ntocDepth: 1\n---\n# A", config={"tocPosition": "bottom"})

    assert converter.default_config.toc_depth == 3
    assert converter.default_config.toc_position == "top"
    assert isinstance(MarkdownConverter().default_config, RenderConfig)
