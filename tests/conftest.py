"""Shared fixtures: isolated environment and logger state for every test."""

import json
import logging
from pathlib import Path

import pytest

from fake_engine import FakeDiagram


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("RHO_HOME", "RHO_RENDERER", "RHO_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_rho_logger():
    logger = logging.getLogger("rho")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture(autouse=True)
def reset_fake_engine():
    FakeDiagram.instances.clear()
    yield
    FakeDiagram.instances.clear()


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document (or raw text) under tmp_path and return its path."""

    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
