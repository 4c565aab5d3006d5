"""
init_config.collector — Wizard questions
========================================
Walks the init wizard's questions in order, skipping the ones that do not
apply to the detected project layout, and returns the answers dict.

The same question flow runs in two modes:

  collect_answers(prefill, root)   Interactive prompts; prefilled values and
                                   detected layout become the shown defaults.
  build_answers(prefill, root)     No prompts; prefilled values win, detected
                                   layout fills the gaps, every answer is
                                   validated (AnswersValidationError).

Answer keys
-----------
  configType, preset, sourceLocation, hasTestsOutsideSource, testLocation,
  useYarnPnP, useTsConfig, tsConfig, tsPreCompilationDeps,
  useWebpackConfig, webpackConfig
"""

import logging
import sys
from pathlib import Path
from typing import Callable

from init_config.defaults import (
    CONFIG_TYPES,
    DEFAULT_PRESET,
    PRESETS,
    TYPESCRIPT_CONFIG,
    WEBPACK_CONFIG,
)
from init_config.detector import ProjectInspector, has_tests_within_source
from init_config.validator import (
    to_source_location_array,
    validate_file_location,
    validate_location,
)

logger = logging.getLogger(__name__)

Validator = Callable[["str | list[str]"], "bool | str"]


class AnswersValidationError(Exception):
    """Raised in non-interactive mode when an answer does not validate."""


# ---------------------------------------------------------------------------
# Terminal helpers
# ---------------------------------------------------------------------------

def _safe_input(prompt: str, default: str = "") -> str:
    """Print *prompt*, optionally showing *default*, and return stripped input."""
    display = f"  {prompt}"
    if default:
        display += f" [{default}]"
    display += ": "
    try:
        raw = input(display).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        sys.exit(0)
    return raw if raw else default


def _safe_print(text: str) -> None:
    """Print text replacing un-encodable chars (Windows CP1252 safety)."""
    enc = sys.stdout.encoding or "utf-8"
    print(text.encode(enc, errors="replace").decode(enc, errors="replace"))


def _section(title: str) -> None:
    print(f"\n  [{title}]")


def _format_location(value: "str | list[str]") -> str:
    if isinstance(value, str):
        return value
    return ", ".join(value)


# ---------------------------------------------------------------------------
# Askers — how a single question gets its answer
# ---------------------------------------------------------------------------

class _PromptAsker:
    """Asks on the terminal; invalid answers are re-asked."""

    def section(self, title: str) -> None:
        _section(title)

    def choose(self, name: str, message: str, choices: list[tuple[str, str]], default: str) -> str:
        values = [value for value, _ in choices]
        _safe_print(f"  {message}")
        for i, (value, label) in enumerate(choices, start=1):
            _safe_print(f"    {i:>3}.  {label}")

        default_idx = str(values.index(default) + 1) if default in values else ""
        while True:
            raw = _safe_input(f"Select [1-{len(choices)}]", default_idx)
            if raw.isdigit() and 1 <= int(raw) <= len(choices):
                return values[int(raw) - 1]
            if raw in values:
                return raw
            _safe_print(f"  (Choose 1–{len(choices)})")

    def confirm(self, name: str, message: str, default: bool) -> bool:
        default_str = "Y/n" if default else "y/N"
        raw = _safe_input(f"{message} ({default_str})").lower()
        if not raw:
            return default
        return raw.startswith("y")

    def text(self, name: str, message: str, default: "str | list[str]", validate: Validator) -> "str | list[str]":
        while True:
            raw = _safe_input(message, _format_location(default))
            result = validate(raw)
            if result is True:
                return raw
            _safe_print(f"  ({result})")


class _PrefillAsker:
    """Takes the default (prefilled or detected) and validates it."""

    def section(self, title: str) -> None:
        pass

    def choose(self, name: str, message: str, choices: list[tuple[str, str]], default: str) -> str:
        values = [value for value, _ in choices]
        if default not in values:
            raise AnswersValidationError(
                f"{name}: '{default}' is not one of {values}"
            )
        return default

    def confirm(self, name: str, message: str, default: bool) -> bool:
        return bool(default)

    def text(self, name: str, message: str, default: "str | list[str]", validate: Validator) -> "str | list[str]":
        # Lists are validated element by element, as given
        result = validate(default)
        if result is not True:
            raise AnswersValidationError(f"{name}: {result}")
        return default


# ---------------------------------------------------------------------------
# Question flow
# ---------------------------------------------------------------------------

def _run_questions(asker, prefill: "dict | None", root: "str | Path | None") -> dict:
    pf = prefill or {}
    root = Path.cwd() if root is None else Path(root)

    layout = ProjectInspector(root).inspect()
    logger.debug("Detected layout for %s: %s", root, layout)

    answers: dict = {}

    # ---- Config type ----
    asker.section("Configuration")
    answers["configType"] = asker.choose(
        "configType",
        "Do you want to use a preset or a self-contained configuration?",
        [(t, t) for t in CONFIG_TYPES],
        pf.get("configType", CONFIG_TYPES[0]),
    )
    if answers["configType"] == "preset":
        answers["preset"] = asker.choose(
            "preset",
            "Pick a preset",
            [(p["value"], p["name"]) for p in PRESETS],
            pf.get("preset", DEFAULT_PRESET),
        )

    # ---- Source / test locations (monorepos are configured per package) ----
    if not layout["is_mono_repo"]:
        asker.section("Sources & tests")
        source_location = asker.text(
            "sourceLocation",
            "Where do your source files live?",
            pf.get("sourceLocation", layout["source_candidates"] or ""),
            lambda answer: validate_location(answer, root),
        )
        answers["sourceLocation"] = to_source_location_array(source_location)

        answers["hasTestsOutsideSource"] = asker.confirm(
            "hasTestsOutsideSource",
            "Do your test files live in a separate folder?",
            pf.get(
                "hasTestsOutsideSource",
                not has_tests_within_source(
                    layout["test_candidates"], answers["sourceLocation"]
                ),
            ),
        )
        if answers["hasTestsOutsideSource"]:
            test_location = asker.text(
                "testLocation",
                "Where do your test files live?",
                pf.get("testLocation", layout["test_candidates"] or ""),
                lambda answer: validate_location(answer, root),
            )
            answers["testLocation"] = to_source_location_array(test_location)

    # ---- Package manager ----
    if layout["pnp_enabled"]:
        asker.section("Package manager")
        answers["useYarnPnP"] = asker.confirm(
            "useYarnPnP",
            "You seem to be using yarn Plug'n'Play. Take that into account?",
            pf.get("useYarnPnP", True),
        )

    # ---- TypeScript ----
    if layout["has_typescript_config"]:
        asker.section("TypeScript")
        answers["useTsConfig"] = asker.confirm(
            "useTsConfig",
            f"Looks like you're using TypeScript. Use a '{TYPESCRIPT_CONFIG}'?",
            pf.get("useTsConfig", True),
        )
        if answers["useTsConfig"]:
            answers["tsConfig"] = asker.text(
                "tsConfig",
                f"Full path to '{TYPESCRIPT_CONFIG}'",
                pf.get("tsConfig", f"./{TYPESCRIPT_CONFIG}"),
                lambda answer: validate_file_location(answer, root),
            )
            answers["tsPreCompilationDeps"] = asker.confirm(
                "tsPreCompilationDeps",
                "Also regard TypeScript dependencies that exist only before compilation?",
                pf.get("tsPreCompilationDeps", True),
            )

    # ---- webpack ----
    if layout["has_webpack_config"]:
        asker.section("webpack")
        answers["useWebpackConfig"] = asker.confirm(
            "useWebpackConfig",
            "Looks like you're using webpack - specify a webpack config?",
            pf.get("useWebpackConfig", True),
        )
        if answers["useWebpackConfig"]:
            answers["webpackConfig"] = asker.text(
                "webpackConfig",
                "Full path to webpack config",
                pf.get("webpackConfig", f"./{WEBPACK_CONFIG}"),
                lambda answer: validate_file_location(answer, root),
            )

    return answers


def collect_answers(
    prefill: "dict | None" = None,
    root: "str | Path | None" = None,
) -> dict:
    """
    Run the interactive Q&A against the project in *root* (default: cwd)
    and return the answers dict.
    """
    print()
    print("  This wizard sets up a dependency-cruiser configuration.")
    print("  Defaults are guessed from the layout of your project.")
    print()
    print("  Press Ctrl+C at any time to cancel.")
    return _run_questions(_PromptAsker(), prefill, root)


def build_answers(
    prefill: "dict | None" = None,
    root: "str | Path | None" = None,
) -> dict:
    """
    Build the answers dict without prompting.

    Raises
    ------
    AnswersValidationError
        On the first answer that does not validate.
    FileNotFoundError
        If *root* does not exist.
    """
    return _run_questions(_PrefillAsker(), prefill, root)
