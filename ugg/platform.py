"""Path resolution for ugg.

Everything ugg persists lives under ``~/.ug``; the paths are computed here
and handed to the stores by the entry point.
"""

from __future__ import annotations

from pathlib import Path

from .errors import HomeDirError

CONFIG_DIR_NAME = ".ug"
CONFIG_FILE_NAME = "cmd.json"
PREFS_FILE_NAME = "preferences.yaml"


def ug_home() -> Path:
    """Return ``~/.ug``.

    Raises :class:`HomeDirError` if the home directory cannot be resolved.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirError("cannot get home directory") from exc
    return home / CONFIG_DIR_NAME


def config_path() -> Path:
    """Return the alias file path, ``~/.ug/cmd.json``."""
    return ug_home() / CONFIG_FILE_NAME

