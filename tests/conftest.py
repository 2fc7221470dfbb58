"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_ensure_repo_root_on_path()

from fakes import FakeClock, RecordingOpener  # noqa: E402


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def opener_factory():
    return RecordingOpener
