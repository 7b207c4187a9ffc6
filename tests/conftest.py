# tests/conftest.py

"""Shared pytest fixtures for all price_tracker tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path, None, None]:
    """Point Settings.LOGS_DIR at a temp dir so runs leave no log files."""
    logs_dir = tmp_path / "logs"
    monkeypatch.setattr(Settings, "LOGS_DIR", logs_dir)
    yield logs_dir
