"""Exception classes for mansite.

Every failure the pipeline can report derives from MansiteError. The CLI
maps each subclass to a process exit code.
"""

from __future__ import annotations


class MansiteError(Exception):
    """Base exception for all mansite errors."""

    pass


class ParseError(MansiteError):
    """Structural error in a man-page source document.

    Raised when content appears where the document structure does not
    allow it, e.g. text or a link before any ``.SH`` section header.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Document identifier (path or ``<stdin>``)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location += " "

        super().__init__(f"{location}{message}")


class ResourceError(MansiteError):
    """A required resource (source document or theme asset) is unusable."""

    action = "access"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"while trying to {self.action} file '{path}': {reason}")


class ResourceOpenError(ResourceError):
    """The resource could not be opened."""

    action = "open"


class ResourceReadError(ResourceError):
    """The resource was opened but reading it failed."""

    action = "read"


class ConfigError(MansiteError):
    """Invalid render configuration value."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Config '{key}': {message}")
