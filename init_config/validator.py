"""
init_config.validator — Answer validators for location prompts
================================================================
Validators follow the prompt convention used by the wizard: they return
``True`` when the answer is acceptable and a message string otherwise.
Nothing is raised; the wizard shows the message and asks again.

Usage
-----
    from init_config.validator import validate_location

    validate_location("src, test")     # True, or e.g.
                                       # "'test' doesn't seem to exist - please try again"
"""

from pathlib import Path
from typing import Iterable

from init_config.detector import file_exists


def _root(root: "str | Path | None") -> Path:
    return Path.cwd() if root is None else Path(root)


def to_source_location_array(location: "str | Iterable[str]") -> list[str]:
    """
    Split a comma separated location string into stripped segments.
    Lists (and other iterables) are returned as a list, unchanged.
    """
    if isinstance(location, str):
        return [segment.strip() for segment in location.split(",")]
    return list(location)


def validate_location(
    location: "str | Iterable[str]",
    root: "str | Path | None" = None,
) -> "bool | str":
    """
    Check that every folder in *location* exists and is a directory.

    Parameters
    ----------
    location : str | Iterable[str]
        One path, a comma separated list of paths, or a list of paths.
    root : str | Path | None
        Directory relative paths are resolved against (default: cwd).

    Returns
    -------
    bool | str
        ``True`` if all segments are folders, otherwise the message for the
        first failing segment. Later segments are not looked at.
    """
    base = _root(root)

    for segment in to_source_location_array(location):
        kind = _entry_kind(base, segment)
        if kind == "missing":
            return f"'{segment}' doesn't seem to exist - please try again"
        if kind == "file":
            return f"'{segment}' doesn't seem to be a folder - please try again"
    return True


def _entry_kind(base: Path, segment: str) -> str:
    """Classify *segment* as ``"missing"``, ``"file"`` or ``"folder"``."""
    if not segment:
        return "missing"
    path = base / segment
    try:
        if not path.exists():
            return "missing"
        return "folder" if path.is_dir() else "file"
    except (OSError, ValueError):
        return "missing"


def validate_file_location(
    path: str,
    root: "str | Path | None" = None,
) -> "bool | str":
    """Validator for single config file paths (tsconfig, webpack config)."""
    if file_exists(path, root):
        return True
    return f"hmm, '{path}' doesn't seem to exist - try again?"
