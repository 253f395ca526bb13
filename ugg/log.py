"""Package logger for ugg."""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("ugg")

_LOG_FORMAT = "%(asctime)s %(message)s"
_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

_handler: logging.StreamHandler | None = None


def setup_logging(verbose: bool = False) -> None:
    """Attach a single stderr handler to the ``ugg`` logger.

    Safe to call more than once; later calls adjust the level and point the
    handler at the current ``sys.stderr``.
    """
    global _handler
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(_handler)
    else:
        _handler.stream = sys.stderr
