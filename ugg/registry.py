"""Set, unset and list operations over the alias map."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .errors import UsageError
from .log import logger
from .persistence import CommandStore


def set_command(store: CommandStore, name: str, command: str) -> None:
    """Register *command* under *name*, replacing any previous binding."""
    if not name or not command:
        raise UsageError("-name or -command is not set")
    store.ensure_dir()
    aliases = store.load()
    aliases[name] = command
    store.save(aliases)
    logger.debug("set %s = %s", name, command)


def unset_command(store: CommandStore, name: str) -> bool:
    """Remove *name* from the alias map.

    Removing an unknown name is not an error.  Returns True if something
    was removed.
    """
    if not name:
        raise UsageError("-name is not set")
    aliases = store.load()
    removed = aliases.pop(name, None) is not None
    store.save(aliases)
    logger.debug("unset %s (%s)", name, "removed" if removed else "not present")
    return removed


def list_commands(store: CommandStore) -> dict[str, str]:
    """Return every registered alias."""
    return store.load()


def format_listing(aliases: dict[str, str]) -> list[tuple[str, str]]:
    """Pair each command with its name padded to the widest name.

    Each entry is ``("<padded name> = ", command)``.
    """
    width = max((len(name) for name in aliases), default=0)
    return [(f"{name.ljust(width)} = ", command) for name, command in aliases.items()]


def render_listing(
    aliases: dict[str, str], console: Console, color: str = "green"
) -> None:
    """Print the listing with commands highlighted, then a blank line."""
    for prefix, command in format_listing(aliases):
        line = Text(prefix)
        line.append(command, style=color)
        console.print(line, soft_wrap=True)
    console.print()
