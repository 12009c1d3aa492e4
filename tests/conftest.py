"""Pytest configuration - consistent CWD and shared fixtures."""
from __future__ import annotations

import os
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]

# Qt must not look for a display when tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_sessionstart(session):
    os.chdir(ROOT)


# Fixtures used by multiple test files

@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for tests that touch Qt painting."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def empty_rng():
    """Generator seeded with the empty string (all-zero fixed point)."""
    from blockicon.rng import SeededRNG
    return SeededRNG("")
