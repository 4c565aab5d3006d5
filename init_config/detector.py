"""
init_config.detector — Project Layout Heuristics
=================================================
Reads the top level of a project directory and derives the signals used to
pre-fill the init wizard: where sources and tests probably live, whether the
repository is a monorepo, whether yarn Plug'n'Play is switched on, and which
compiler / bundler configs are present.

Every function takes an optional *root* (defaults to the current working
directory at call time) and only ever reads the filesystem.

Usage
-----
    from init_config.detector import ProjectInspector, has_tests_within_source

    info = ProjectInspector("~/code/my-app").inspect()
    print(info["source_candidates"])    # e.g. ["src"]
    print(info["is_mono_repo"])         # e.g. False

    has_tests_within_source(["spec"], ["src"])   # False
"""

import json
import logging
import os
from pathlib import Path, PurePosixPath
from typing import Iterable

from init_config.defaults import (
    MONO_REPO_MARKER,
    PACKAGE_MANIFEST,
    SOURCE_FOLDER_CANDIDATES,
    TEST_FOLDER_CANDIDATES,
    TYPESCRIPT_CONFIG,
    WEBPACK_CONFIG,
)

logger = logging.getLogger(__name__)


def _root(root: "str | Path | None") -> Path:
    return Path.cwd() if root is None else Path(root)


# ---------------------------------------------------------------------------
# Leaf primitives
# ---------------------------------------------------------------------------

def list_folder_names(root: "str | Path | None" = None) -> list[str]:
    """
    Return the names of the top-level entries of *root* (files and
    directories alike), sorted. An unreadable or missing directory yields
    an empty list.
    """
    try:
        return sorted(os.listdir(_root(root)))
    except OSError:
        return []


def file_exists(path: "str | Path", root: "str | Path | None" = None) -> bool:
    """Return True if *path* (relative paths are taken from *root*) exists."""
    if path == "":
        return False
    try:
        return (_root(root) / path).exists()
    except (OSError, ValueError):
        return False


def folder_names_to_pattern(folder_names: Iterable[str]) -> str:
    """
    Turn folder names into an anchored alternation, e.g.
    ``["bin", "src"]`` -> ``"^(bin|src)"``.

    Names are embedded as-is (no escaping) in the order given. An empty
    sequence gives ``"^()"``, which only matches the empty string.
    """
    return f"^({'|'.join(folder_names)})"


# ---------------------------------------------------------------------------
# Monorepo / candidate folders
# ---------------------------------------------------------------------------

def is_likely_mono_repo(
    folder_names: "Iterable[str] | None" = None,
    root: "str | Path | None" = None,
) -> bool:
    """
    True when *folder_names* holds the monorepo marker (``packages``).
    Reads the top level of *root* when *folder_names* is omitted.
    """
    if folder_names is None:
        folder_names = list_folder_names(root)
    return MONO_REPO_MARKER in folder_names


def get_folder_candidates(
    candidates: Iterable[str],
    actual_folders: "Iterable[str] | None" = None,
    root: "str | Path | None" = None,
) -> list[str]:
    """
    Narrow *candidates* down to the ones that actually exist.

    Parameters
    ----------
    candidates : Iterable[str]
        Default folder names, most likely first.
    actual_folders : Iterable[str] | None
        Top-level entries of the project. Read from *root* when omitted.
    root : str | Path | None
        Project root used when *actual_folders* is omitted.

    Returns
    -------
    list[str]
        *candidates* unchanged when the project looks like a monorepo (top
        level names say little about where sources live there), otherwise
        the candidates present in *actual_folders*, in candidate order.
    """
    candidates = list(candidates)
    if actual_folders is None:
        actual_folders = list_folder_names(root)
    actual = set(actual_folders)

    if is_likely_mono_repo(actual):
        return candidates
    return [c for c in candidates if c in actual]


def get_source_folder_candidates(root: "str | Path | None" = None) -> list[str]:
    return get_folder_candidates(SOURCE_FOLDER_CANDIDATES, root=root)


def get_test_folder_candidates(root: "str | Path | None" = None) -> list[str]:
    return get_folder_candidates(TEST_FOLDER_CANDIDATES, root=root)


# ---------------------------------------------------------------------------
# Test / source overlap
# ---------------------------------------------------------------------------

def _is_within(folder: str, source: str) -> bool:
    source_parts = PurePosixPath(source).parts
    if not source_parts:
        return False
    return PurePosixPath(folder).parts[:len(source_parts)] == source_parts


def has_tests_within_source(
    test_folders: Iterable[str],
    source_folders: "Iterable[str] | None" = None,
) -> bool:
    """
    Return True when the tests live inside the source tree.

    No test folders at all counts as "inside". Otherwise every test folder
    has to be one of *source_folders* or sit below one of them; a single
    test folder outside the sources is enough to return False.
    """
    test_folders = list(test_folders)
    sources = list(source_folders or [])
    if not test_folders:
        return True
    return all(
        any(_is_within(folder, source) for source in sources)
        for folder in test_folders
    )


# ---------------------------------------------------------------------------
# Package manager mode
# ---------------------------------------------------------------------------

def pnp_is_enabled(root: "str | Path | None" = None) -> bool:
    """
    True only when ``package.json`` in *root* has ``installConfig.pnp`` set
    to JSON ``true``. Any problem reading or parsing the manifest gives False.
    """
    try:
        manifest = json.loads(
            (_root(root) / PACKAGE_MANIFEST).read_text(encoding="utf-8")
        )
    except (OSError, ValueError, RecursionError):
        return False

    if not isinstance(manifest, dict):
        return False
    install_config = manifest.get("installConfig")
    if not isinstance(install_config, dict):
        return False
    return install_config.get("pnp") is True


# ---------------------------------------------------------------------------
# One-shot inspection
# ---------------------------------------------------------------------------

class ProjectInspector:
    """
    Collects every layout signal for one project root from a single read of
    its top-level entries.

    Parameters
    ----------
    root : str | Path
        Path to the project root.
    """

    def __init__(self, root: "str | Path") -> None:
        self.root = Path(root)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def inspect(self) -> dict:
        """
        Return a dictionary describing the detected project layout.

        Keys
        ----
        root, top_level_entries, is_mono_repo, source_candidates,
        test_candidates, tests_within_source, pnp_enabled,
        has_typescript_config, has_webpack_config
        """
        if not self.root.exists():
            raise FileNotFoundError(f"Project root not found: {self.root}")

        entries = list_folder_names(self.root)
        source_candidates = get_folder_candidates(SOURCE_FOLDER_CANDIDATES, entries)
        test_candidates   = get_folder_candidates(TEST_FOLDER_CANDIDATES, entries)

        info = {
            "root":                  str(self.root),
            "top_level_entries":     entries,
            "is_mono_repo":          is_likely_mono_repo(entries),
            "source_candidates":     source_candidates,
            "test_candidates":       test_candidates,
            "tests_within_source":   has_tests_within_source(
                test_candidates, source_candidates
            ),
            "pnp_enabled":           pnp_is_enabled(self.root),
            "has_typescript_config": TYPESCRIPT_CONFIG in entries,
            "has_webpack_config":    WEBPACK_CONFIG in entries,
        }
        logger.info(
            "Inspected %s: mono_repo=%s sources=%s tests=%s",
            self.root,
            info["is_mono_repo"],
            source_candidates,
            test_candidates,
        )
        return info
