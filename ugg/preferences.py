"""User preferences for ugg.

Loads optional settings from preferences.yaml next to the alias file
(~/.ug/preferences.yaml by default):

    shell: /bin/sh      # commands run as `<shell> -c <command>`
    list:
      color: green      # color of commands in `ugg list` (name or #rrggbb)

Falls back to sensible defaults if the file doesn't exist or is invalid.
The file is only ever read; users create it by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from rich.color import Color, ColorParseError

from .log import logger

DEFAULT_SHELL = "/bin/sh"
DEFAULT_LIST_COLOR = "green"


@dataclass
class ListPreferences:
    """Display settings for ``ugg list``."""

    color: str = DEFAULT_LIST_COLOR


@dataclass
class Preferences:
    """Top-level ugg preferences."""

    shell: str = DEFAULT_SHELL
    listing: ListPreferences = field(default_factory=ListPreferences)


def resolve_color(value: str) -> str | None:
    """Return *value* if rich understands it as a color, else ``None``.

    Accepts color names (``green``, ``bright_cyan``) and ``#rrggbb`` hex codes.
    """
    value = value.strip()
    if not value:
        return None
    try:
        Color.parse(value)
    except ColorParseError:
        return None
    return value


def load_preferences(path: Path) -> Preferences:
    """Load preferences from YAML file.

    Falls back to defaults if the file doesn't exist or is invalid.
    """
    prefs = Preferences()
    try:
        if not path.exists():
            return prefs
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        logger.debug("failed to load preferences from %s", path, exc_info=True)
        return prefs
    if not isinstance(data, dict):
        logger.debug("ignoring preferences in %s: not a mapping", path)
        return prefs

    shell = data.get("shell")
    if isinstance(shell, str) and shell.strip():
        prefs.shell = shell.strip()

    if isinstance(data.get("list"), dict):
        color = data["list"].get("color")
        if color is not None:
            resolved = resolve_color(str(color))
            if resolved is None:
                logger.debug("unknown list color %r, using %s", color, prefs.listing.color)
            else:
                prefs.listing.color = resolved

    return prefs
