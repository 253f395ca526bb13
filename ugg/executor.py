"""Run a stored command through the shell."""

from __future__ import annotations

import subprocess

from .errors import ExecutionError
from .log import logger

# Exit status shells use for "command not found / cannot execute".
SPAWN_FAILURE_CODE = 127


def run_command(command: str, shell: str = "/bin/sh") -> None:
    """Run *command* as ``<shell> -c <command>`` and wait for it.

    The child shares this process's stdin, stdout and stderr, so output
    streams live.  Raises :class:`ExecutionError` if the shell cannot be
    started or the command exits with a non-zero status.
    """
    logger.debug("running %s -c %r", shell, command)
    try:
        subprocess.run([shell, "-c", command], check=True)
    except subprocess.CalledProcessError as exc:
        returncode = exc.returncode
        if returncode < 0:
            # Killed by a signal; report it the way shells do.
            returncode = 128 - returncode
        raise ExecutionError(
            f"cannot run command {command}, exit status {returncode}",
            returncode=returncode,
        ) from exc
    except OSError as exc:
        raise ExecutionError(
            f"cannot run command {command}, {exc}",
            returncode=SPAWN_FAILURE_CODE,
        ) from exc
