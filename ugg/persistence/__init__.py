"""Persistence layer – each store owns its file path, data format, and I/O."""

from .commands import CommandStore

__all__ = [
    "CommandStore",
]
