"""Shared test fixtures for journey tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from typer.testing import CliRunner

from journey.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and any JOURNEY_* variables from the environment."""
    for name in ("JOURNEY_LOG_LEVEL", "JOURNEY_PRECISION", "JOURNEY_SHOW_WELCOME"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    """A CLI runner for invoking the ``journey`` app with scripted input."""
    return CliRunner()
