"""Shared test fixtures for Rig tests."""
import logging
import random
from pathlib import Path

import pytest

from rig.core import logger as rig_logger
from rig.core.config import set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Re-read RIG_* environment variables in every test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def reset_file_logging():
    """Drop file handlers so every test can configure its own log file."""
    yield
    root = logging.getLogger("rig")
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    rig_logger._file_logging_configured = False


@pytest.fixture
def rng():
    """Seeded random source so random suffixes are reproducible."""
    return random.Random(1234)


@pytest.fixture
def make_tree(tmp_path):
    """Create a template tree from directory names and ``{path: contents}`` files."""

    def _make(dirs=(), files=None, root_name="template"):
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for directory in dirs:
            (root / directory).mkdir(parents=True, exist_ok=True)
        for rel_path, contents in (files or {}).items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(contents, bytes):
                path.write_bytes(contents)
            else:
                path.write_text(contents, encoding="utf-8")
        return root

    return _make


# Common test data
PROJECT_TOML = """
    name = "My Project"
    package = "deep.pkg.path"
    will_be_ignored = [4, 5, 6, 7]
    module_name = "quux"
"""

G8_PROPS = """
    name = value1
    bar = baz!
    package = com.example.me
"""


@pytest.fixture
def project_toml():
    return PROJECT_TOML


@pytest.fixture
def g8_props():
    return G8_PROPS


@pytest.fixture
def dest(tmp_path) -> Path:
    return tmp_path / "generated"
