"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Drop LINGUA_SCRIPTS_* variables so settings start from defaults."""
    for name in list(os.environ):
        if name.startswith("LINGUA_SCRIPTS_"):
            monkeypatch.delenv(name)
