"""Pytest configuration and fixtures."""

import logging
import os
from pathlib import Path

import pytest
import structlog

from cuedoc.generator import CueGenerator
from cuedoc.parser import CueParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample cue sheets."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture():
    """Return a loader reading a fixture file as text."""

    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def parser() -> CueParser:
    return CueParser()


@pytest.fixture
def generator() -> CueGenerator:
    return CueGenerator()


@pytest.fixture(autouse=True)
def clean_cuedoc_env(monkeypatch):
    """Keep CUEDOC_* settings from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("CUEDOC_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_logging():
    """Undo the root logger and structlog setup done by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
