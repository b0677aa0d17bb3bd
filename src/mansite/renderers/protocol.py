"""PageRenderer protocol: the shared interface of mansite's output modes.

Any object with ``render(page) -> str`` conforms. HtmlRenderer and
SummaryRenderer are the built-in implementations; the CLI picks one per run.

Example:
    from mansite.renderers.protocol import PageRenderer

    def emit(renderer: PageRenderer, page: Page) -> str:
        return renderer.render(page)

"""

from typing import Protocol

from mansite.nodes import Page


class PageRenderer(Protocol):
    """Protocol for page renderers."""

    def render(self, page: Page) -> str:
        """Render a Page to a string."""
        ...
