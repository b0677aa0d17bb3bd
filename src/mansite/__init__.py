"""
mansite: turn a man-page style source document into a static HTML page.

The source is a small roff-inspired, line-oriented format::

    .TH ls 1 2024-01-01 GNU User\\ Commands
    .SH NAME
    ls - list directory contents
    .SH SEE ALSO
    .LN https://www.gnu.org/software/coreutils coreutils

Quick Start:
    >>> from mansite import parse, render
    >>> page = parse(".TH ls 1\\n.SH NAME\\nls - list directory contents")
    >>> page.sections[0].name
    'NAME'
    >>> html = render(page)

    >>> # Or use the Converter class
    >>> from mansite import Converter, RenderConfig
    >>> convert = Converter(RenderConfig(accent_hue=120))
    >>> html = convert(".TH ls 1\\n.SH NAME\\nls")

Source text is embedded in the output unescaped; only feed it trusted
documents.
"""

from mansite.config import RenderConfig
from mansite.errors import (
    ConfigError,
    MansiteError,
    ParseError,
    ResourceError,
    ResourceOpenError,
    ResourceReadError,
)
from mansite.lexer import Lexer
from mansite.nodes import TITLE_FIELDS, TITLE_LABELS, Command, Link, Page, Section, Text
from mansite.parser import Parser
from mansite.renderers.html import HtmlRenderer
from mansite.renderers.protocol import PageRenderer
from mansite.renderers.summary import SummaryRenderer, summarize
from mansite.source import decode_source, display_name, read_resource
from mansite.title import split_title_fields
from mansite.tokens import Line, LineKind

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> Page:
    """Parse man-page source into a Page.

    Args:
        source: Decoded source text
        source_file: Document identifier for diagnostics

    Returns:
        Immutable Page

    Raises:
        ParseError: If text or a link appears before the first ``.SH``
    """
    return Parser(source, source_file).parse()


def render(
    page: Page,
    config: RenderConfig | None = None,
    *,
    theme_css: str | None = None,
) -> str:
    """Render a Page to a complete HTML document.

    Args:
        page: Parsed page
        config: Theme location and hues (defaults if None)
        theme_css: Stylesheet text to embed instead of reading the theme

    Returns:
        HTML string
    """
    return HtmlRenderer(config, theme_css=theme_css).render(page)


def load_page(path: str) -> Page:
    """Read and parse the document at ``path`` (``-`` for stdin).

    Raises:
        ResourceOpenError: If the document cannot be opened
        ResourceReadError: If reading the document fails
        ParseError: If the document is structurally invalid
    """
    source = decode_source(read_resource(path))
    return Parser(source, display_name(path)).parse()


class Converter:
    """High-level converter combining parser and renderers.

    Usage:
        >>> convert = Converter(theme_css="body { margin: 0 }")
        >>> html = convert(".TH ls 1\\n.SH NAME\\nls")

        >>> page = convert.parse(".SH NAME\\nls")
        >>> convert.summarize(page).splitlines()[-2:]
        ['SECTION NAME', '  COMMAND(Text) ls']

    """

    __slots__ = ("_renderer",)

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        theme_css: str | None = None,
    ) -> None:
        self._renderer = HtmlRenderer(config, theme_css=theme_css)

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render source in one call."""
        return self.render(self.parse(source, source_file=source_file))

    def parse(self, source: str, *, source_file: str | None = None) -> Page:
        return Parser(source, source_file).parse()

    def render(self, page: Page) -> str:
        return self._renderer.render(page)

    def summarize(self, page: Page) -> str:
        return summarize(page)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "summarize",
    "load_page",
    "Converter",
    # Document model
    "TITLE_FIELDS",
    "TITLE_LABELS",
    "Command",
    "Link",
    "Page",
    "Section",
    "Text",
    # Parsing components
    "Lexer",
    "Line",
    "LineKind",
    "Parser",
    "split_title_fields",
    # Renderers
    "HtmlRenderer",
    "PageRenderer",
    "SummaryRenderer",
    # Configuration
    "RenderConfig",
    # Errors
    "ConfigError",
    "MansiteError",
    "ParseError",
    "ResourceError",
    "ResourceOpenError",
    "ResourceReadError",
]
