"""Line kinds and Line tokens produced by the mansite lexer.

The lexer classifies every source line into exactly one LineKind and wraps
it in a Line token that the parser matches on exhaustively.

Thread Safety:
Line is frozen (immutable) and safe to share across threads.
LineKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    """Classification of a single source line.

    Directive kinds are checked in declaration order; a line that starts
    with the directive prefix but matches no known token is
    UNKNOWN_DIRECTIVE, and everything else is TEXT.

    """

    TITLE = auto()  # .TH name section date source manual-title
    SECTION = auto()  # .SH name
    LINK = auto()  # .LN href label...
    UNKNOWN_DIRECTIVE = auto()  # .XX anything
    TEXT = auto()  # literal content, including blank lines


# Leading character shared by all directives
DIRECTIVE_PREFIX = "."

# Known directive tokens, in classification priority order
DIRECTIVE_TOKENS: dict[str, LineKind] = {
    ".TH": LineKind.TITLE,
    ".SH": LineKind.SECTION,
    ".LN": LineKind.LINK,
}


@dataclass(frozen=True, slots=True)
class Line:
    """A classified source line.

    Attributes:
        kind: Line classification
        value: Payload of the line. For TITLE and SECTION the text after the
            directive token with leading whitespace removed; for LINK the
            untouched text after the token; for UNKNOWN_DIRECTIVE and TEXT
            the whole line.
        raw: The original line, without its newline
        lineno: Line number (1-indexed)
        source_file: Document identifier used in diagnostics

    """

    kind: LineKind
    value: str
    raw: str
    lineno: int
    source_file: str | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Line({self.kind.name}, {val!r}, {self.lineno})"

    @property
    def location(self) -> str:
        """Format the position as ``file:lineno`` for diagnostics."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return str(self.lineno)
