"""Pytest configuration for the gerrors test suite.

Clears every ``GERRORS_*`` environment variable for each test so settings
tests start from built-in defaults regardless of the developer's shell.
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from gerrors.tests.utils import RecordingLogger


@pytest.fixture(autouse=True)
def clean_gerrors_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove gerrors environment overrides for the duration of a test."""

    for name in list(os.environ):
        if name.startswith("GERRORS_"):
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    """Yield a fresh full-capability recording logger."""

    return RecordingLogger()
