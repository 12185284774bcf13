"""Shared fixtures for the support responder tests."""

import os

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test in an empty working directory with a clean environment."""
    for name in list(os.environ):
        if name.startswith("SUPPORT_RESPONDER_") or name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_COLOR"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    structlog.reset_defaults()


@pytest.fixture
def write_responses(tmp_path):
    """Write a default responses file and return its path."""
    def _write(content, name="default.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
