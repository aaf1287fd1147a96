"""
Shared test fixtures for the abortable test suite.

The abort hook and the failure formatter are process-wide, and settings are
cached, so every test starts from the defaults and leaves them behind.
"""

from __future__ import annotations

import os
from typing import Any

import pytest

from abortable import Abort, Hooks, reset_hooks
from abortable.config import effective_settings, get_settings


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch):
    """Clear ABORTABLE_* variables, reset hooks and drop cached settings."""
    for name in list(os.environ):
        if name.startswith("ABORTABLE_"):
            monkeypatch.delenv(name)
    reset_hooks()
    _drop_cached_settings()
    yield
    reset_hooks()
    _drop_cached_settings()


def _drop_cached_settings() -> None:
    # Without re-reading: a test may leave an invalid ABORTABLE_* behind.
    get_settings.cache_clear()
    effective_settings.cache_clear()


class RecordingAbort:
    """Abort hook that records every payload before raising Abort."""

    def __init__(self) -> None:
        self.payloads: list[Any] = []

    def __call__(self, payload: Any):
        self.payloads.append(payload)
        raise Abort(payload)


@pytest.fixture()
def recording_abort() -> RecordingAbort:
    return RecordingAbort()


@pytest.fixture()
def recording_hooks(recording_abort: RecordingAbort) -> Hooks:
    """Hooks whose abort records payloads; pass with hooks=..."""
    return Hooks(abort=recording_abort)
