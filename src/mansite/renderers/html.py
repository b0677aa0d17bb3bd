"""HTML renderer for man pages.

Renders a Page into a complete, self-contained HTML document: a generated
hue style block, the theme stylesheet embedded verbatim, a man-page style
header and footer, and one ``<section>`` per source section.

Source text is emitted exactly as written. Nothing is HTML-escaped, so
markup in the source document passes straight through to the page.

Thread Safety:
The renderer holds only immutable configuration. Every render() call uses
its own StringBuilder, so one instance can be shared freely.
"""

import logging

from mansite.config import RenderConfig
from mansite.nodes import Link, Page, Section, Text
from mansite.source import read_text_resource
from mansite.stringbuilder import StringBuilder

logger = logging.getLogger(__name__)

# Replaces a blank text line; marks a paragraph break
BLANK_LINE_HTML = "<br /><br />"


def format_hue(value: float) -> str:
    """Format a hue as a CSS angle, e.g. ``220deg``."""
    return f"{value:g}deg"


def hue_declarations(config: RenderConfig) -> str:
    """Render the ``:root`` rule declaring the configured hue properties."""
    sb = StringBuilder()
    sb.line(":root {")
    with sb.indented():
        sb.line(f"--background-hue: {format_hue(config.background_hue)};")
        sb.line(f"--text-hue: {format_hue(config.text_hue)};")
        sb.line(f"--accent-hue: {format_hue(config.accent_hue)};")
    sb.line("}")
    return sb.build()


def page_id(page: Page) -> str:
    """Man-page identifier shown in the header, e.g. ``ls (1)``."""
    return f"{page.name} ({page.section_number})"


class HtmlRenderer:
    """Render a Page to an HTML document.

    Usage:
        >>> from mansite import parse
        >>> page = parse(".TH ls 1\\n.SH NAME\\nls - list directory contents")
        >>> html = HtmlRenderer(theme_css="").render(page)
        >>> "<h2>NAME</h2>" in html
        True

    The theme stylesheet is read from ``config.theme_path`` once per
    render() call unless ``theme_css`` is given, in which case that text is
    embedded instead and no file is touched.
    """

    __slots__ = ("_config", "_theme_css")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        theme_css: str | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Theme location and hue values (defaults if None)
            theme_css: Stylesheet text to embed instead of reading the theme
        """
        self._config = config or RenderConfig()
        self._theme_css = theme_css

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, page: Page) -> str:
        """Render page to an HTML string.

        Raises:
            ResourceOpenError: If the theme asset cannot be opened
            ResourceReadError: If reading the theme asset fails
        """
        theme = self._load_theme()

        sb = StringBuilder()
        sb.line("<!DOCTYPE html>")
        sb.line("<html>")
        with sb.indented():
            self._render_head(page, theme, sb)
            sb.line("<body>")
            with sb.indented():
                self._render_header(page, sb)
                sb.line("<main>")
                with sb.indented():
                    for section in page.sections:
                        self._render_section(section, sb)
                sb.line("</main>")
                self._render_footer(page, sb)
            sb.line("</body>")
        sb.line("</html>")
        return sb.build()

    def _load_theme(self) -> str:
        if self._theme_css is not None:
            return self._theme_css
        css = read_text_resource(self._config.theme_path)
        logger.debug("loaded theme %s (%d chars)", self._config.theme_path, len(css))
        return css

    # =========================================================================
    # Document frame
    # =========================================================================

    def _render_head(self, page: Page, theme: str, sb: StringBuilder) -> None:
        sb.line("<head>")
        with sb.indented():
            sb.line('<meta charset="utf-8" />')
            sb.line(f"<title>{page.manual_title}</title>")
            sb.line("<style>")
            with sb.indented():
                for decl in hue_declarations(self._config).splitlines():
                    sb.line(decl)
            sb.line("</style>")
            sb.line("<style>")
            sb.append(theme)
            if theme and not theme.endswith("\n"):
                sb.append("\n")
            sb.line("</style>")
        sb.line("</head>")

    def _render_header(self, page: Page, sb: StringBuilder) -> None:
        # Identifier on both sides of the title, like a printed man page
        ident = page_id(page)
        sb.line('<header class="page-header">')
        with sb.indented():
            sb.line(f'<span class="page-id">{ident}</span>')
            sb.line(f"<h1>{page.manual_title}</h1>")
            sb.line(f'<span class="page-id">{ident}</span>')
        sb.line("</header>")

    def _render_footer(self, page: Page, sb: StringBuilder) -> None:
        sb.line('<footer class="page-footer">')
        with sb.indented():
            sb.line(f'<span class="page-source">{page.source}</span>')
            sb.line(f'<span class="page-date">{page.date}</span>')
            sb.line(f'<span class="page-source">{page.source}</span>')
        sb.line("</footer>")

    # =========================================================================
    # Sections and commands
    # =========================================================================

    def _render_section(self, section: Section, sb: StringBuilder) -> None:
        sb.line("<section>")
        with sb.indented():
            sb.line(f"<h2>{section.name}</h2>")
            for command in section.commands:
                self._render_command(command, sb)
        sb.line("</section>")

    def _render_command(self, command: Text | Link, sb: StringBuilder) -> None:
        """Render one command; content lines are written unindented and unescaped."""
        match command:
            case Text() if command.is_blank:
                sb.raw_line(BLANK_LINE_HTML)
            case Text():
                sb.raw_line(command.content)
            case Link():
                href, label = command.parts()
                sb.raw_line(f'<a href="{href}">{label}</a>')
