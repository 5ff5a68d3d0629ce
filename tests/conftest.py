"""Shared fixtures for the routegraph test-suite."""

from __future__ import annotations

import pytest

from routegraph import config


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep ``ROUTEGRAPH_*`` variables from leaking into individual tests."""

    config._load_environment.cache_clear()
    monkeypatch.delenv("ROUTEGRAPH_STRICT", raising=False)
    monkeypatch.delenv("ROUTEGRAPH_LOG_LEVEL", raising=False)
    yield
    config._load_environment.cache_clear()
