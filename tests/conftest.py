"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def toy_store():
    """Profile store loaded from the en/xx toy models."""
    from store.profile_store import load_profile_store
    from tests.fixture_paths import fixture_path

    return load_profile_store(fixture_path("languages"), short_text_limit=200)
