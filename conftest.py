"""Pytest configuration: ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_gematria_env(monkeypatch):
    """Keep GEMATRIA_* variables and any local .env file out of the tests."""
    for name in list(os.environ):
        if name.startswith("GEMATRIA_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("gematria_scanner.config.load_dotenv", lambda: False)
    yield
