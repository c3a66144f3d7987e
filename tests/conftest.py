"""
Test configuration and fixtures for pytest.

Fixtures include: a config factory pointing at a temporary output folder and
a helper for writing pre-start fragments.
"""

import sys
import os
from pathlib import Path
import pytest

# Add the repository root to sys.path
repo_dir = Path(__file__).parent.parent
sys.path.insert(0, str(repo_dir))


def pytest_configure(config):
    """
    Pytest hook called before test collection.
    Registers custom markers and resets cached settings.
    """
    for key in list(os.environ):
        if key.startswith("EASYPACK_"):
            del os.environ[key]

    from easypack.config import get_settings
    get_settings.cache_clear()

    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


@pytest.fixture
def output_dir(tmp_path):
    """Destination folder for generated scripts (not created yet)."""
    return tmp_path / "target" / "bin"


@pytest.fixture
def fragments_dir(tmp_path):
    """Directory holding pre-start fragments."""
    directory = tmp_path / "src-bin"
    directory.mkdir()
    return directory


@pytest.fixture
def make_config(output_dir, fragments_dir):
    """Factory building a ScriptConfig with sensible test defaults."""
    from easypack.services.scripts import PreStart, ScriptConfig

    def _make(**overrides):
        values = {
            "process_name": "app",
            "destination": output_dir,
            "pre_start": PreStart(directory=fragments_dir),
        }
        values.update(overrides)
        return ScriptConfig(**values)

    return _make
