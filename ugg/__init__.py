"""ugg -- run your own shell commands by name."""

__version__ = "1.0.0"
