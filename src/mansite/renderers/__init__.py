"""Output renderers for parsed pages.

- html: HtmlRenderer, the full themed HTML document
- summary: SummaryRenderer, a flat text listing for debugging
- protocol: PageRenderer, the interface both implement
"""

from mansite.renderers.html import HtmlRenderer
from mansite.renderers.protocol import PageRenderer
from mansite.renderers.summary import SummaryRenderer

__all__ = ["HtmlRenderer", "PageRenderer", "SummaryRenderer"]
