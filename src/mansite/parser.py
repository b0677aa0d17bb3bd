"""Single-pass directive parser producing the typed page model.

Consumes classified lines from the Lexer and builds a Page. The only state
carried between lines is the current (most recently opened) section.

Thread Safety:
- Parser instances are single-use; create one per document
- The returned Page is immutable (frozen dataclasses)

"""

from __future__ import annotations

import logging

from mansite.errors import ParseError
from mansite.lexer import Lexer
from mansite.nodes import EMPTY_TITLE, Command, Link, Page, Section, Text
from mansite.title import split_title_fields
from mansite.tokens import Line, LineKind

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_FILE = "<string>"


class _OpenSection:
    """Mutable section under construction; frozen into a Section at the end."""

    __slots__ = ("name", "commands")

    def __init__(self, name: str) -> None:
        self.name = name
        self.commands: list[Command] = []

    def freeze(self) -> Section:
        return Section(name=self.name, commands=tuple(self.commands))


class Parser:
    """Directive parser for man-page sources.

    Usage:
        >>> page = Parser(".TH LS 1\\n.SH NAME\\nls - list").parse()
        >>> page.sections[0].name
        'NAME'

    Directives:
        ``.TH`` sets the five title fields, ``.SH`` opens a section,
        ``.LN`` appends a link to the current section. Other lines starting
        with ``.`` are reported and skipped. Anything else is literal text
        and needs an open section.

    """

    __slots__ = ("_source", "_source_file", "_title", "_sections")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Decoded man-page source
            source_file: Document identifier for diagnostics
        """
        self._source = source
        self._source_file = source_file or DEFAULT_SOURCE_FILE
        self._title: tuple[str, str, str, str, str] = EMPTY_TITLE
        self._sections: list[_OpenSection] = []

    def parse(self) -> Page:
        """Parse the whole source into a Page.

        Returns:
            Fully populated, immutable Page

        Raises:
            ParseError: If text or a link appears before any section
        """
        for line in Lexer(self._source, self._source_file).tokenize():
            match line.kind:
                case LineKind.TITLE:
                    self._title = split_title_fields(line.value)
                    logger.debug("%s: title fields %r", line.location, self._title)
                case LineKind.SECTION:
                    self._sections.append(_OpenSection(line.value))
                    logger.debug("%s: section %r", line.location, line.value)
                case LineKind.LINK:
                    self._current_section(line, "link").commands.append(Link(line.value))
                case LineKind.UNKNOWN_DIRECTIVE:
                    logger.warning("%s: unrecognized command: %s", line.location, line.raw)
                case LineKind.TEXT:
                    self._current_section(line, "text").commands.append(Text(line.raw))

        return Page(
            source_file=self._source_file,
            title=self._title,
            sections=tuple(section.freeze() for section in self._sections),
        )

    def _current_section(self, line: Line, what: str) -> _OpenSection:
        if not self._sections:
            raise ParseError(
                f"trying to add {what} without specifying section header .SH",
                lineno=line.lineno,
                source_file=self._source_file,
            )
        return self._sections[-1]


def parse(source: str, *, source_file: str | None = None) -> Page:
    """Parse man-page source text into a Page."""
    return Parser(source, source_file).parse()
