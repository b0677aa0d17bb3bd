"""Plain-text debug summary of a parsed Page.

Lists the five title fields by label, then every section and command in
document order. Intended for inspecting what the parser built. Values are
printed as stored, so title fields keep the space that closed them.

Example output::

    title: ls
    section: 1
    date: 2024-01-01
    source: GNU
    manual-section: User Commands
    SECTION NAME
      COMMAND(Text) ls - list directory contents
      COMMAND(Link)  https://gnu.org GNU

"""

from mansite.nodes import TITLE_LABELS, Link, Page, Text
from mansite.stringbuilder import StringBuilder


class SummaryRenderer:
    """Render a Page as a flat text listing."""

    __slots__ = ()

    def render(self, page: Page) -> str:
        sb = StringBuilder()
        for label, value in zip(TITLE_LABELS, page.title, strict=True):
            sb.line(f"{label}: {value}")

        for section in page.sections:
            sb.line(f"SECTION {section.name}")
            with sb.indented():
                for command in section.commands:
                    match command:
                        case Text():
                            value = command.content
                        case Link():
                            value = command.target
                    sb.line(f"COMMAND({type(command).__name__}) {value}")
        return sb.build()


def summarize(page: Page) -> str:
    """Render the debug summary of a page."""
    return SummaryRenderer().render(page)
