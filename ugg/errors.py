"""Exception hierarchy for ugg.

Lower layers raise these; only the entry point turns them into exit codes.
"""

from __future__ import annotations


class UggError(Exception):
    """Base class for all ugg errors."""


class ConfigError(UggError):
    """The backing alias file could not be read or written."""


class ConfigIOError(ConfigError):
    """Creating, reading or writing the alias file failed."""


class ConfigParseError(ConfigError):
    """The alias file is not a JSON object of strings."""


class ConfigSerializeError(ConfigError):
    """The alias map could not be encoded as JSON."""


class UsageError(UggError):
    """A subcommand was invoked with missing or empty arguments."""

    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.usage = usage


class UnknownAliasError(UggError):
    """The requested alias is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not set in config")
        self.name = name


class ExecutionError(UggError):
    """The shell could not be spawned or the command exited non-zero."""

    def __init__(self, message: str, returncode: int = 1) -> None:
        super().__init__(message)
        self.returncode = returncode


class HomeDirError(UggError):
    """The user's home directory could not be determined."""
