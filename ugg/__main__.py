"""Entry point for the ugg CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from . import __version__
from .errors import (
    ConfigError,
    ExecutionError,
    HomeDirError,
    UnknownAliasError,
    UsageError,
)
from .executor import run_command
from .log import logger, setup_logging
from .persistence import CommandStore
from .platform import PREFS_FILE_NAME, config_path
from .preferences import Preferences, load_preferences
from .registry import list_commands, render_listing, set_command, unset_command

SUBCOMMANDS = ("set", "unset", "list")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

_EPILOG = """\
Examples:
  ugg set -name brew -command "brew update && brew upgrade"
  ugg brew
  ugg list
  ugg unset -name brew
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message, usage=self.format_usage())


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser.

    Only global options are parsed here; everything after the first
    positional token is handed to the subcommand's own parser untouched.
    """
    parser = _ArgumentParser(
        prog="ugg",
        description="Run your own shell commands by name.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"ugg {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug details to stderr",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="Alias file to use (default: ~/.ug/cmd.json)",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="set, unset, list, or the name of an alias to run",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


# Flags whose value is always the next token, even one starting with "-".
_VALUE_FLAGS = frozenset({"-name", "--name", "-command", "--command"})


def _join_flag_values(rest: list[str]) -> list[str]:
    """Rewrite ``-flag value`` pairs as ``-flag=value``.

    argparse refuses values that look like options (``-command -v``);
    the ``=`` form hands them over verbatim.
    """
    joined: list[str] = []
    i = 0
    while i < len(rest):
        token = rest[i]
        if token in _VALUE_FLAGS and i + 1 < len(rest):
            joined.append(f"{token}={rest[i + 1]}")
            i += 2
        else:
            joined.append(token)
            i += 1
    return joined


def _set_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="ugg set", description="Set shell command with name")
    parser.add_argument("-name", "--name", required=True, help="Alias name")
    parser.add_argument(
        "-command", "--command", required=True, help="Shell command to run"
    )
    return parser


def _unset_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ugg unset", description="Delete shell command with name"
    )
    parser.add_argument("-name", "--name", required=True, help="Alias name")
    return parser


def _list_parser() -> argparse.ArgumentParser:
    return _ArgumentParser(prog="ugg list", description="List shell commands with name")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def _dispatch(command: str, rest: list[str], config: Path) -> None:
    store = CommandStore(config)
    logger.debug("using alias file %s", config)

    if command == "set":
        opts = _set_parser().parse_args(_join_flag_values(rest))
        set_command(store, opts.name, opts.command)
    elif command == "unset":
        opts = _unset_parser().parse_args(_join_flag_values(rest))
        unset_command(store, opts.name)
    elif command == "list":
        _list_parser().parse_args(rest)
        prefs = _load_prefs(config)
        render_listing(
            list_commands(store), Console(highlight=False), prefs.listing.color
        )
    else:
        # Unknown names fail here, before any shell is spawned.
        shell_command = store.get(command)
        prefs = _load_prefs(config)
        run_command(shell_command, shell=prefs.shell)


def _load_prefs(config: Path) -> Preferences:
    return load_preferences(config.parent / PREFS_FILE_NAME)


def main(argv: list[str] | None = None) -> int:
    """Run ugg and return the process exit code."""
    setup_logging()
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        logger.error("%s", exc)
        print(exc.usage, file=sys.stderr, end="")
        return EXIT_USAGE

    setup_logging(args.verbose)

    if not args.command:
        print(
            f"sub command is not set, available commands are {', '.join(SUBCOMMANDS)}"
            " or the name of an alias\n",
            file=sys.stderr,
        )
        parser.print_help(sys.stderr)
        return EXIT_ERROR

    try:
        _dispatch(args.command, args.args, args.config or config_path())
    except UsageError as exc:
        logger.error("%s", exc)
        if exc.usage:
            print(exc.usage, file=sys.stderr, end="")
        return EXIT_USAGE
    except ExecutionError as exc:
        logger.error("%s", exc)
        return exc.returncode
    except (ConfigError, UnknownAliasError, HomeDirError) as exc:
        logger.error("%s", exc)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
