"""Pytest configuration for gptzator tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_home(monkeypatch, tmp_path) -> None:
    """Keep token files and env-derived settings out of the real home directory."""
    monkeypatch.setenv("GPTZATOR_HOME", str(tmp_path / "gptzator-home"))
    monkeypatch.delenv("GPTZATOR_BASE_URL", raising=False)
    monkeypatch.delenv("GPTZATOR_TIMEOUT_MS", raising=False)
