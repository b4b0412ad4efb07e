"""Pytest configuration and shared fixtures for circular list tests."""

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from circularlist import CircularList
from circularlist.settings import reset_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep CIRCULARLIST_* variables from leaking into or between tests."""
    for name in list(os.environ):
        if name.startswith("CIRCULARLIST_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def one_two_three():
    """Mutable list [1, 2, 3] with the pivot on 1."""
    return CircularList([1, 2, 3])


@pytest.fixture
def rotated_four():
    """Mutable list built from [1, 2, 3, 4] and rotated twice: [3, 4, 1, 2]."""
    cl = CircularList([1, 2, 3, 4])
    cl.rotate()
    cl.rotate()
    return cl


@pytest.fixture
def frozen():
    """Immutable list [1, 2, 3]."""
    return CircularList.immutable([1, 2, 3])
