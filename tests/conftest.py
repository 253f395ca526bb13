"""Shared test fixtures for the ugg test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from ugg.persistence import CommandStore


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich from forcing ANSI colors into captured output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Alias file location inside a not-yet-created ``.ug`` directory."""
    return tmp_path / ".ug" / "cmd.json"


@pytest.fixture
def store(config_file: Path) -> CommandStore:
    """A CommandStore whose directory already exists."""
    config_file.parent.mkdir()
    return CommandStore(config_file)


@pytest.fixture
def populated_store(store: CommandStore) -> CommandStore:
    """A CommandStore seeded with two aliases."""
    store.save({"a": "echo hi", "bb": "ls"})
    return store
