"""
Pytest configuration and fixtures
"""
from pathlib import Path
import sys

import pytest

# Make the project root importable when running pytest without installing
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def location_dir(tmp_path):
    """A folder with two sub folders and one plain file."""
    (tmp_path / "existing-folder").mkdir()
    (tmp_path / "another-existing-folder").mkdir()
    (tmp_path / "existing-file").write_text("not a folder", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_project(tmp_path):
    """Factory: build a project root with the given folders and files."""

    def _make(folders=(), files=None):
        for folder in folders:
            (tmp_path / folder).mkdir(parents=True, exist_ok=True)
        for name, content in (files or {}).items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
