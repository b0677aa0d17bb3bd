"""Indent-aware StringBuilder for rendered output.

Fragments are collected in a list and joined once at the end. Lines can be
written at the current nesting depth, which the renderers use to keep the
generated HTML readable.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

INDENT = "  "


class StringBuilder:
    """Append-only text accumulator with a nesting depth.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.line("<head>")
        >>> with sb.indented():
        ...     sb.line("<title>ls</title>")
        >>> sb.line("</head>")
        >>> print(sb.build(), end="")
        <head>
          <title>ls</title>
        </head>

    """

    __slots__ = ("_parts", "_depth")

    def __init__(self, depth: int = 0) -> None:
        self._parts: list[str] = []
        self._depth = depth

    def append(self, s: str) -> StringBuilder:
        """Append text as-is, without indentation or newline."""
        if s:
            self._parts.append(s)
        return self

    def line(self, s: str = "") -> StringBuilder:
        """Append one line at the current depth.

        Empty lines are written without indentation.
        """
        if s:
            self._parts.append(INDENT * self._depth)
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def raw_line(self, s: str) -> StringBuilder:
        """Append one line verbatim, ignoring the current depth."""
        self._parts.append(s)
        self._parts.append("\n")
        return self

    @contextmanager
    def indented(self) -> Iterator[StringBuilder]:
        """Increase the depth for the duration of the block."""
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    @property
    def depth(self) -> int:
        return self._depth

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
