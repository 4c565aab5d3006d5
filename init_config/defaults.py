"""
init_config.defaults — Built-in wizard defaults
================================================
Loads ``defaults.json`` (shipped next to this file) once per process and
exposes its values as module constants.

Usage
-----
    from init_config.defaults import SOURCE_FOLDER_CANDIDATES, TYPESCRIPT_CONFIG

    print(SOURCE_FOLDER_CANDIDATES)   # ("src", "lib", "app", "bin")
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

# Absolute path to the bundled defaults file
DEFAULTS_FILE: Path = Path(__file__).parent / "defaults.json"


@lru_cache(maxsize=None)
def load_defaults() -> dict:
    """
    Load and cache ``defaults.json``.

    Raises
    ------
    FileNotFoundError
        If the bundled defaults file is missing (broken install).
    """
    if not DEFAULTS_FILE.exists():
        raise FileNotFoundError(f"Defaults file not found: {DEFAULTS_FILE}")
    data = json.loads(DEFAULTS_FILE.read_text(encoding="utf-8"))
    logger.debug("Loaded wizard defaults from %s", DEFAULTS_FILE)
    return data


_DEFAULTS = load_defaults()

# ---------------------------------------------------------------------------
# Folder candidates — ordered, most likely first
# ---------------------------------------------------------------------------

SOURCE_FOLDER_CANDIDATES: tuple[str, ...] = tuple(_DEFAULTS["source_folder_candidates"])
TEST_FOLDER_CANDIDATES:   tuple[str, ...] = tuple(_DEFAULTS["test_folder_candidates"])

# Folder whose presence marks a multi-package repository
MONO_REPO_MARKER: str = _DEFAULTS["mono_repo_marker"]

# ---------------------------------------------------------------------------
# Well-known file names (relative to the project root)
# ---------------------------------------------------------------------------

PACKAGE_MANIFEST:  str = _DEFAULTS["package_manifest"]
TYPESCRIPT_CONFIG: str = _DEFAULTS["typescript_config"]
WEBPACK_CONFIG:    str = _DEFAULTS["webpack_config"]

# ---------------------------------------------------------------------------
# Question choices
# ---------------------------------------------------------------------------

CONFIG_TYPES: tuple[str, ...] = tuple(_DEFAULTS["config_types"])
PRESETS: tuple[dict, ...] = tuple(_DEFAULTS["presets"])
DEFAULT_PRESET: str = PRESETS[0]["value"]
