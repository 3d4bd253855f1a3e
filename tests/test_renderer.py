"""Tests for the markdown-it renderer and plugin registry."""

import sys

import pytest

from mdhtml.core import renderer as renderer_module
from mdhtml.core.config import DEFAULT_CONFIG, RenderConfig
from mdhtml.core.plugins import PluginRegistry, default_registry
from mdhtml.core.renderer import MarkdownRenderer, RendererUnavailable


def render(markdown, **overrides):
    return MarkdownRenderer(DEFAULT_CONFIG.merged(overrides)).render(markdown)


# --- Basic rendering ---

def test_headings_and_paragraphs():
    html = render("# Hello\n\nWorld")
    assert "<h1>Hello</h1>" in html
    assert "<p>World</p>" in html


def test_tables_enabled():
    html = render("| a | b |\n|---|---|\n| 1 | 2 |")
    assert "<table>" in html


def test_raw_html_allowed():
    assert '<span class="x">hi</span>' in render('<span class="x">hi</span>')


def test_breaks_option():
    assert "<br" not in render("line one\nline two")
    assert "<br" in render("line one\nline two", breaks=True)


def test_image_source_is_decoded():
    html = render("![diagram](images/my%20diagram.png)")
    assert 'src="images/my diagram.png"' in html


# --- Highlighting ---

def test_highlight_known_language():
    html = MarkdownRenderer().highlight("def foo():\n    return 1\n", "python")

    assert html.startswith('<pre class="hljs"><code><div>')
    assert html.endswith("</div></code></pre>")
    assert "<span" in html


def test_highlight_unknown_language_is_plain():
    html = MarkdownRenderer().highlight("<b>x</b>", "no-such-language")
    assert html == '<pre class="hljs"><code><div>&lt;b&gt;x&lt;/b&gt;</div></code></pre>'


def test_highlight_disabled():
    html = MarkdownRenderer(RenderConfig(highlight=False)).highlight("x = 1", "python")
    assert html == '<pre class="hljs"><code><div>x = 1</div></code></pre>'


def test_highlight_failure_falls_back(monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise RuntimeError("lexer exploded")

    monkeypatch.setattr(renderer_module, "pygments_highlight", broken)
    html = MarkdownRenderer().highlight("a < b", "python")

    assert html == '<pre class="hljs"><code><div>a &lt; b</div></code></pre>'
    assert "lexer exploded" in caplog.text


def test_fenced_code_uses_highlight_hook():
    html = render("```python\nprint('hi')\n```")

    assert '<pre class="hljs">' in html
    assert "language-python" not in html


def test_mermaid_fence():
    html = render("```mermaid\ngraph TD; A-->B\n```")

    assert '<div class="mermaid">graph TD; A--&gt;B\n</div>' in html
    assert "hljs" not in html


# --- Plugins ---

def test_checkbox_plugin():
    html = render("- [x] done\n- [ ] todo")

    assert 'type="checkbox"' in html
    assert "task-list-item" in html


def test_emoji_plugin():
    assert "😄" in render("Hi :smile:")
    assert ":smile:" in render("Hi :smile:", emoji=False)


def test_emoji_not_applied_to_code():
    assert ":smile:" in render("`:smile:`")


def test_container_plugin():
    html = render("::: warning\nBe careful\n:::")

    assert '<div class="warning">' in html
    assert "<p>Be careful</p>" in html


def test_plantuml_plugin():
    html = render("@startuml\nAlice -> Bob: hi\n@enduml")

    assert '<img src="http://www.plantuml.com/plantuml/svg/' in html
    assert 'alt="uml diagram"' in html
    assert "Alice" not in html


def test_plantuml_custom_markers_and_server():
    html = render(
        "<<<\nAlice -> Bob\n>>>",
        plantumlOpenMarker="<<<",
        plantumlCloseMarker=">>>",
        plantumlServer="https://uml.example.com/",
    )
    assert '<img src="https://uml.example.com/svg/' in html


def test_plantuml_disabled_without_server():
    html = render("@startuml\nAlice -> Bob\n@enduml", plantumlServer="")

    assert "<img" not in html
    assert "@startuml" in html


def test_plantuml_unclosed_block_is_text():
    html = render("@startuml\nAlice -> Bob")
    assert "<img" not in html


def test_registry_controls_plugins():
    registry = default_registry()
    registry.unregister("emoji")

    html = MarkdownRenderer(DEFAULT_CONFIG, registry).render("Hi :smile:")
    assert ":smile:" in html


def test_custom_plugin_is_installed():
    calls = []

    def install(md, config):
        calls.append(config.toc_depth)

    registry = PluginRegistry({"checkbox": install})
    MarkdownRenderer(DEFAULT_CONFIG, registry)

    assert calls == [3]


def test_registry_membership():
    registry = default_registry()
    copy = registry.copy()
    copy.unregister("plantuml")

    assert "plantuml" in registry
    assert "plantuml" not in copy
    assert set(registry.names()) == {"checkbox", "emoji", "container", "plantuml"}
    assert registry.install("missing", None, DEFAULT_CONFIG) is False

    assert callable(registry.get("plantuml"))
    with pytest.raises(KeyError):
        copy.get("plantuml")


# --- Availability ---

def test_renderer_unavailable(monkeypatch):
    monkeypatch.setitem(sys.modules, "markdown_it", None)

    with pytest.raises(RendererUnavailable):
        MarkdownRenderer()
