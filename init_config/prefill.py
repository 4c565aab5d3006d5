"""
init_config.prefill — Prefilled answers loader
===============================================
Loads a YAML (or JSON) file with answers for the init wizard and validates it
against ``schemas/answers-schema.json``. The result is used as defaults in
interactive mode or as the full answer set with ``--non-interactive``.

Usage
-----
    from init_config.prefill import load_prefill

    prefill = load_prefill("init-answers.yaml")
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

try:
    import jsonschema
    from jsonschema import ValidationError
except ImportError:
    raise ImportError("jsonschema is required. Run: pip install jsonschema")

logger = logging.getLogger(__name__)

ANSWERS_SCHEMA_PATH = Path(__file__).parent / "schemas" / "answers-schema.json"


class PrefillValidationError(Exception):
    """Raised when a prefill file is unreadable or fails schema validation."""


def load_prefill(path: "str | Path") -> dict[str, Any]:
    """
    Load and validate a prefill answers file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    PrefillValidationError
        If the file is not valid YAML/JSON or does not match the schema.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Prefill file not found: {path}")

    logger.info("Loading prefilled answers from: %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise PrefillValidationError(f"Could not parse {path}: {exc}") from exc

    # An empty file means "no answers"
    if data is None:
        data = {}

    validate_prefill(data)
    logger.debug("Prefilled keys: %s", sorted(data))
    return data


def validate_prefill(data: Any) -> None:
    """Validate *data* against the answers schema."""
    schema = json.loads(ANSWERS_SCHEMA_PATH.read_text(encoding="utf-8"))
    try:
        jsonschema.validate(instance=data, schema=schema)
    except ValidationError as exc:
        raise PrefillValidationError(
            f"Prefill validation failed at '{exc.json_path}': {exc.message}"
        ) from exc
