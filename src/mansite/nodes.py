"""Typed document model for mansite.

All nodes are frozen dataclasses with slots, built once by the parser and
only read afterwards by the renderers.

Node Hierarchy:
Page
└── Section (ordered)
    └── Command (ordered)
        ├── Text
        └── Link

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

# Number of fields carried by the .TH title directive
TITLE_FIELDS = 5

# Labels for the title fields, in order
TITLE_LABELS = ("title", "section", "date", "source", "manual-section")

EMPTY_TITLE: tuple[str, str, str, str, str] = ("", "", "", "", "")


# =============================================================================
# Commands
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """A literal content line.

    Rendered verbatim. A line that is empty after trimming marks vertical
    space instead.

    """

    content: str

    @property
    def is_blank(self) -> bool:
        """True when the line holds nothing but whitespace."""
        return not self.content.strip()


@dataclass(frozen=True, slots=True)
class Link:
    """A link entry from a ``.LN`` directive.

    The target is kept unsplit (including any leading whitespace) and only
    broken into href and label when rendered.

    Source: .LN https://example.com Example Site
    HTML: <a href="https://example.com">Example Site</a>

    """

    target: str

    def parts(self) -> tuple[str, str]:
        """Split the target into ``(href, label)``.

        The split happens on the first run of whitespace; both halves are
        trimmed. A missing label is the empty string.
        """
        pieces = self.target.split(None, 1)
        if not pieces:
            return "", ""
        href = pieces[0]
        label = pieces[1].strip() if len(pieces) > 1 else ""
        return href, label


type Command = Text | Link


# =============================================================================
# Structure
# =============================================================================


@dataclass(frozen=True, slots=True)
class Section:
    """A named, ordered group of commands opened by ``.SH``."""

    name: str
    commands: tuple[Command, ...] = ()


@dataclass(frozen=True, slots=True)
class Page:
    """A whole parsed man page.

    Attributes:
        source_file: Document identifier (path, or ``<stdin>``)
        title: Exactly five title fields; unset fields are empty strings
        sections: Sections in document order

    """

    source_file: str
    title: tuple[str, str, str, str, str] = EMPTY_TITLE
    sections: tuple[Section, ...] = ()

    def __post_init__(self) -> None:
        if len(self.title) != TITLE_FIELDS:
            raise ValueError(
                f"Page title must have {TITLE_FIELDS} fields, got {len(self.title)}"
            )

    @property
    def name(self) -> str:
        return self.title[0]

    @property
    def section_number(self) -> str:
        return self.title[1]

    @property
    def date(self) -> str:
        return self.title[2]

    @property
    def source(self) -> str:
        return self.title[3]

    @property
    def manual_title(self) -> str:
        """Display title, used for ``<title>`` and the main heading."""
        return self.title[4]
