"""Alias -> shell command persistence store."""

from __future__ import annotations

from pathlib import Path

from ..errors import ConfigParseError, UnknownAliasError
from ..log import logger
from ._base import JsonStore


class CommandStore(JsonStore):
    """Registered shell commands (``{name: command}``)."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    def load(self) -> dict[str, str]:
        """Load the alias map from disk."""
        data = self.load_raw()
        if not isinstance(data, dict):
            raise ConfigParseError(
                f"{self.path} must hold a JSON object, got {type(data).__name__}"
            )
        for name, command in data.items():
            if not isinstance(command, str):
                raise ConfigParseError(
                    f"{self.path}: command for {name!r} is not a string"
                )
        return data

    def save(self, aliases: dict[str, str]) -> None:
        """Persist the alias map to disk."""
        self.save_raw(aliases, sort_keys=True)

    def get(self, name: str) -> str:
        """Return the command registered under *name*."""
        aliases = self.load()
        try:
            command = aliases[name]
        except KeyError:
            raise UnknownAliasError(name) from None
        logger.debug("resolved %s -> %s", name, command)
        return command
