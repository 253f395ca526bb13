"""Base JSON persistence store."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ConfigIOError, ConfigParseError, ConfigSerializeError
from ..log import logger

# Owner rwx, group/other rx.  The execute bits carry no meaning.
FILE_MODE = 0o755
DIR_MODE = 0o755


class JsonStore:
    """Whole-file JSON store.

    Unlike a cache, the file is the only copy of the data, so every failure
    is raised instead of being papered over with ``_default()``.  An absent
    or empty file reads as ``_default()``.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def ensure_dir(self) -> None:
        """Create the parent directory of the store file if it is missing."""
        try:
            self.path.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(f"cannot create config directory: {exc}") from exc

    def load_raw(self) -> dict | list:
        """Read and parse the JSON file, creating it empty if absent."""
        try:
            if not self.path.exists():
                logger.debug("creating empty store at %s", self.path)
                self.path.touch(mode=FILE_MODE)
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigParseError(f"cannot parse {self.path}: {exc}") from exc
        except OSError as exc:
            raise ConfigIOError(f"cannot load config: {exc}") from exc

        if not content.strip():
            return self._default()
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigParseError(f"cannot parse {self.path}: {exc}") from exc

    def save_raw(self, data: dict | list, *, sort_keys: bool = False) -> None:
        """Overwrite the file with *data* as pretty-printed JSON."""
        try:
            text = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)
        except (TypeError, ValueError) as exc:
            raise ConfigSerializeError(f"cannot encode config: {exc}") from exc
        try:
            self.path.write_text(text + "\n", encoding="utf-8")
            self.path.chmod(FILE_MODE)
        except OSError as exc:
            raise ConfigIOError(f"cannot write config to file: {exc}") from exc

    # -- override point -------------------------------------------------------

    def _default(self) -> dict | list:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}
