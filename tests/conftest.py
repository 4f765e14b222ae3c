# tests/conftest.py

"""Shared pytest fixtures for all nft_market tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(tmp_path: Path) -> Generator[None, None, None]:
    """Point LOGS_DIR at a temp dir so test runs leave no log files."""
    with patch.object(Settings, "LOGS_DIR", tmp_path / "logs"):
        yield
