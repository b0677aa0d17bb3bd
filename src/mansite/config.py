"""Render configuration for mansite.

A single immutable RenderConfig is built once per run (from defaults, CLI
overrides, or a plain mapping) and handed to the HTML renderer explicitly.

Usage:
    >>> from mansite.config import RenderConfig
    >>> config = RenderConfig(accent_hue=120)
    >>> config.accent_hue
    120

    >>> RenderConfig.from_dict({"text_hue": 40, "unknown_key": "ignored"}).text_hue
    40

"""

from dataclasses import dataclass, fields, replace
from numbers import Real
from pathlib import Path
from typing import Any

from mansite.errors import ConfigError

# Stylesheet shipped with the package, embedded when no theme is configured
DEFAULT_THEME_PATH = str(Path(__file__).parent / "themes" / "default.css")

DEFAULT_BACKGROUND_HUE = 220
DEFAULT_TEXT_HUE = 220
DEFAULT_ACCENT_HUE = 28

_HUE_FIELDS = ("background_hue", "text_hue", "accent_hue")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable theming configuration.

    Attributes:
        theme_path: Location of the stylesheet asset embedded verbatim into
            every rendered page (``-`` is not allowed; stdin holds the source)
        background_hue: Hue angle in degrees for the background color
        text_hue: Hue angle in degrees for the text color
        accent_hue: Hue angle in degrees for links and headings

    """

    theme_path: str = DEFAULT_THEME_PATH
    background_hue: float = DEFAULT_BACKGROUND_HUE
    text_hue: float = DEFAULT_TEXT_HUE
    accent_hue: float = DEFAULT_ACCENT_HUE

    def __post_init__(self) -> None:
        for name in _HUE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigError(name, f"expected a number of degrees, got {value!r}")
        if not self.theme_path or self.theme_path == "-":
            raise ConfigError("theme_path", f"invalid theme location {self.theme_path!r}")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a mapping.

        Only keys that name RenderConfig fields are used; unknown keys are
        silently ignored. Numeric strings are accepted for hue values.

        Args:
            config_dict: Mapping with config values

        Returns:
            New RenderConfig instance

        Raises:
            ConfigError: If a hue value is not a number
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for name in _HUE_FIELDS:
            if isinstance(filtered.get(name), str):
                filtered[name] = parse_hue(name, filtered[name])
        return cls(**filtered)

    def with_overrides(self, **overrides: Any) -> "RenderConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def parse_hue(name: str, text: str) -> float:
    """Parse a textual hue angle, with or without a ``deg`` suffix."""
    raw = text.strip()
    if raw.endswith("deg"):
        raw = raw[:-3]
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(name, f"expected a number of degrees, got {text!r}") from None
    return int(value) if value.is_integer() else value


__all__ = [
    "DEFAULT_THEME_PATH",
    "RenderConfig",
    "parse_hue",
]
