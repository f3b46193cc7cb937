"""Pytest configuration — ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep NUMERO_* settings from the developer's shell out of the tests."""
    for name in [n for n in os.environ if n.startswith("NUMERO_")]:
        monkeypatch.delenv(name)
    yield
