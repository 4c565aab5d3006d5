"""
init_config — Project layout inference for the init wizard
===========================================================
Guesses where a JavaScript / TypeScript project keeps its sources and tests,
whether it is a monorepo, whether yarn Plug'n'Play is on and which compiler /
bundler configs it has, so the init wizard can offer sensible defaults. Also
validates the folder locations the user types in.

Sub-modules
-----------
  init_config.defaults     Built-in candidate folders and file names
  init_config.detector     Layout heuristics + ProjectInspector
  init_config.validator    Location validators (True | message)
  init_config.prefill      Prefilled answers loader (YAML / JSON + schema)
  init_config.collector    Question flow (interactive / non-interactive)

Public API (re-exported here for convenience)
---------------------------------------------
  from init_config import collect_answers, build_answers
  from init_config import ProjectInspector, validate_location
"""

from init_config.collector import AnswersValidationError, build_answers, collect_answers
from init_config.detector import (
    ProjectInspector,
    folder_names_to_pattern,
    get_folder_candidates,
    has_tests_within_source,
    is_likely_mono_repo,
    list_folder_names,
    pnp_is_enabled,
)
from init_config.validator import validate_location

__all__ = [
    "AnswersValidationError",
    "ProjectInspector",
    "build_answers",
    "collect_answers",
    "folder_names_to_pattern",
    "get_folder_candidates",
    "has_tests_within_source",
    "is_likely_mono_repo",
    "list_folder_names",
    "pnp_is_enabled",
    "validate_location",
]
