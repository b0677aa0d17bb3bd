"""Line-oriented lexer for man-page sources.

Splits the source on newlines and classifies each line by prefix. Every
line is visited exactly once; there is no lookahead and no rewinding.

Usage:
    >>> from mansite.lexer import Lexer
    >>> for line in Lexer(".SH NAME\\nls - list directory contents").tokenize():
    ...     print(line)
    Line(SECTION, 'NAME', 1)
    Line(TEXT, 'ls - list directory...', 2)

Thread Safety:
Lexer instances are single-use. Create one per source string.

"""

from __future__ import annotations

from collections.abc import Iterator

from mansite.tokens import DIRECTIVE_PREFIX, DIRECTIVE_TOKENS, Line, LineKind

# All known directive tokens share this length
_TOKEN_LEN = 3


def split_lines(source: str) -> list[str]:
    """Split source into lines on ``\\n``.

    A trailing newline does not start an extra empty line, while an
    unterminated final line is still returned. Carriage returns are kept
    as ordinary characters.
    """
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def classify_line(text: str) -> LineKind:
    """Classify a single line by its leading characters."""
    if text.startswith(DIRECTIVE_PREFIX):
        return DIRECTIVE_TOKENS.get(text[:_TOKEN_LEN], LineKind.UNKNOWN_DIRECTIVE)
    return LineKind.TEXT


class Lexer:
    """Classify each line of a man-page source.

    Usage:
        >>> lines = list(Lexer(".TH LS 1").tokenize())
        >>> lines[0].kind, lines[0].value
        (<LineKind.TITLE: 1>, 'LS 1')

    """

    __slots__ = ("_source", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Decoded man-page source
            source_file: Document identifier for diagnostics
        """
        self._source = source
        self._source_file = source_file

    def tokenize(self) -> Iterator[Line]:
        """Yield one classified Line per source line, in order."""
        for lineno, text in enumerate(split_lines(self._source), start=1):
            kind = classify_line(text)
            yield Line(
                kind=kind,
                value=self._payload(kind, text),
                raw=text,
                lineno=lineno,
                source_file=self._source_file,
            )

    @staticmethod
    def _payload(kind: LineKind, text: str) -> str:
        match kind:
            case LineKind.TITLE | LineKind.SECTION:
                return text[_TOKEN_LEN:].lstrip()
            case LineKind.LINK:
                return text[_TOKEN_LEN:]
            case LineKind.UNKNOWN_DIRECTIVE | LineKind.TEXT:
                return text
