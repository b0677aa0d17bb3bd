"""Tests for HtmlRenderer."""

from __future__ import annotations

from pathlib import Path

import pytest

from mansite import parse, render
from mansite.config import RenderConfig
from mansite.errors import ResourceOpenError
from mansite.nodes import Link, Page, Section, Text
from mansite.renderers.html import (
    BLANK_LINE_HTML,
    HtmlRenderer,
    format_hue,
    hue_declarations,
    page_id,
)

EXPECTED = """\
<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>Manual</title>
    <style>
      :root {
        --background-hue: 220deg;
        --text-hue: 220deg;
        --accent-hue: 28deg;
      }
    </style>
    <style>
body{}
    </style>
  </head>
  <body>
    <header class="page-header">
      <span class="page-id">ls (1)</span>
      <h1>Manual</h1>
      <span class="page-id">ls (1)</span>
    </header>
    <main>
      <section>
        <h2>NAME</h2>
ls
<br /><br />
<a href="http://x">X</a>
      </section>
    </main>
    <footer class="page-footer">
      <span class="page-source">GNU</span>
      <span class="page-date">2024-01-01</span>
      <span class="page-source">GNU</span>
    </footer>
  </body>
</html>
"""


def _page(*sections: Section, title: tuple[str, str, str, str, str] | None = None) -> Page:
    return Page(
        source_file="test.1",
        title=title or ("ls", "1", "2024-01-01", "GNU", "Manual"),
        sections=sections,
    )


class TestHtmlRenderer:
    def test_full_document(self) -> None:
        page = parse(".TH ls 1 2024-01-01 GNU Manual\n.SH NAME\nls\n\n.LN http://x X\n")
        assert HtmlRenderer(theme_css="body{}").render(page) == EXPECTED

    def test_preamble(self) -> None:
        html = HtmlRenderer(theme_css="").render(_page())
        assert html.startswith("<!DOCTYPE html>\n<html>\n")
        assert '<meta charset="utf-8" />' in html
        assert "<title>Manual</title>" in html
        assert html.endswith("</body>\n</html>\n")

    def test_link(self) -> None:
        page = _page(Section("SEE ALSO", (Link(" http://example.com Example Site"),)))
        html = HtmlRenderer(theme_css="").render(page)
        assert '<a href="http://example.com">Example Site</a>' in html

    def test_link_whitespace_runs(self) -> None:
        page = _page(Section("S", (Link("\t http://a.b   Label  with  spaces  "),)))
        html = HtmlRenderer(theme_css="").render(page)
        assert '<a href="http://a.b">Label  with  spaces</a>' in html

    def test_link_without_label(self) -> None:
        page = _page(Section("S", (Link(" http://a.b"),)))
        html = HtmlRenderer(theme_css="").render(page)
        assert '<a href="http://a.b"></a>' in html

    @pytest.mark.parametrize("content", ["", "   ", "\t", " \t "])
    def test_blank_text_is_double_break(self, content: str) -> None:
        page = _page(Section("S", (Text(content),)))
        html = HtmlRenderer(theme_css="").render(page)
        assert f"\n{BLANK_LINE_HTML}\n" in html
        assert BLANK_LINE_HTML == "<br /><br />"

    def test_text_is_not_escaped(self) -> None:
        page = _page(Section("S", (Text('<b>bold</b> & "quotes"'),)))
        html = HtmlRenderer(theme_css="").render(page)
        assert '\n<b>bold</b> & "quotes"\n' in html

    def test_text_whitespace_preserved(self) -> None:
        page = _page(Section("S", (Text("   indented  "),)))
        html = HtmlRenderer(theme_css="").render(page)
        assert "\n   indented  \n" in html

    def test_header_and_footer_duplication(self) -> None:
        html = HtmlRenderer(theme_css="").render(_page())
        assert html.count('<span class="page-id">ls (1)</span>') == 2
        assert html.count("GNU</span>") == 2
        assert html.count("2024-01-01</span>") == 1
        header = html.index("<header")
        h1 = html.index("<h1>Manual</h1>")
        footer = html.index("<footer")
        assert header < h1 < footer

    def test_footer_order(self) -> None:
        html = HtmlRenderer(theme_css="").render(_page())
        footer = html[html.index("<footer") :]
        assert footer.index("GNU") < footer.index("2024-01-01") < footer.rindex("GNU")

    def test_section_blocks_in_order(self) -> None:
        page = _page(Section("FIRST"), Section("SECOND"), Section("THIRD"))
        html = HtmlRenderer(theme_css="").render(page)
        assert html.count("<section>") == 3
        assert html.index("FIRST") < html.index("SECOND") < html.index("THIRD")

    def test_empty_title_fields(self) -> None:
        page = Page(source_file="x")
        html = HtmlRenderer(theme_css="").render(page)
        assert "<title></title>" in html
        assert '<span class="page-id"> ()</span>' in html

    def test_title_escape_kept(self) -> None:
        page = parse(".TH ls 1 d s User\\ Commands\n")
        html = HtmlRenderer(theme_css="").render(page)
        assert "<title>User\\ Commands</title>" in html

    def test_parsed_title_fields_keep_closing_space(self) -> None:
        page = parse(".TH ls 1 2024-01-01 GNU Manual\n")
        html = HtmlRenderer(theme_css="").render(page)
        assert html.count('<span class="page-id">ls  (1 )</span>') == 2
        assert '<span class="page-date">2024-01-01 </span>' in html

    def test_deterministic(self) -> None:
        page = parse(".TH a 1\n.SH X\ntext\n\n.LN http://x y\n")
        renderer = HtmlRenderer(theme_css="css")
        assert renderer.render(page) == renderer.render(page)


class TestTheme:
    def test_theme_embedded_verbatim(self) -> None:
        css = "body { color: red; }\n/* <not escaped> */\n"
        html = HtmlRenderer(theme_css=css).render(_page())
        assert "<style>\n" + css + "    </style>" in html

    def test_hue_style_precedes_theme(self) -> None:
        html = HtmlRenderer(theme_css="/* theme */").render(_page())
        assert html.index("--accent-hue") < html.index("/* theme */")

    def test_theme_read_from_path(self, tmp_path: Path) -> None:
        theme = tmp_path / "site.css"
        theme.write_text("main { padding: 0 }\n", encoding="utf-8")
        config = RenderConfig(theme_path=str(theme))
        html = HtmlRenderer(config).render(_page())
        assert "main { padding: 0 }" in html

    def test_missing_theme_raises(self, tmp_path: Path) -> None:
        config = RenderConfig(theme_path=str(tmp_path / "missing.css"))
        with pytest.raises(ResourceOpenError) as exc_info:
            HtmlRenderer(config).render(_page())
        assert "missing.css" in str(exc_info.value)

    def test_default_theme_is_bundled(self) -> None:
        html = HtmlRenderer().render(_page())
        assert "var(--accent-hue)" in html

    def test_configured_hues(self) -> None:
        config = RenderConfig(background_hue=10, text_hue=20.5, accent_hue=300)
        html = HtmlRenderer(config, theme_css="").render(_page())
        assert "--background-hue: 10deg;" in html
        assert "--text-hue: 20.5deg;" in html
        assert "--accent-hue: 300deg;" in html


class TestHelpers:
    def test_format_hue(self) -> None:
        assert format_hue(220) == "220deg"
        assert format_hue(12.5) == "12.5deg"
        assert format_hue(0) == "0deg"

    def test_hue_declarations(self) -> None:
        decl = hue_declarations(RenderConfig(background_hue=1, text_hue=2, accent_hue=3))
        assert decl == (
            ":root {\n"
            "  --background-hue: 1deg;\n"
            "  --text-hue: 2deg;\n"
            "  --accent-hue: 3deg;\n"
            "}\n"
        )

    def test_page_id(self) -> None:
        assert page_id(_page()) == "ls (1)"


class TestRenderFunction:
    def test_render_uses_config(self) -> None:
        page = parse(".SH A\nx\n")
        html = render(page, RenderConfig(accent_hue=42), theme_css="")
        assert "--accent-hue: 42deg;" in html
