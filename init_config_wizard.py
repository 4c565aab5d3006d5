#!/usr/bin/env python3
"""
init_config_wizard.py — Init Wizard for a dependency-cruiser configuration
===========================================================================
Asks the questions needed to set up a dependency-cruiser configuration,
using the layout of the current project to pre-fill sensible answers.

Usage:
    python init_config_wizard.py                             # fully interactive
    python init_config_wizard.py --root ../my-app            # inspect another project
    python init_config_wizard.py --config answers.yaml       # prefill answers
    python init_config_wizard.py --inspect                   # print detected layout only
    python init_config_wizard.py --non-interactive --config answers.yaml  # CI mode

The answers (or the detected layout with --inspect) are printed as JSON on
stdout. Nothing is written to disk. In interactive mode the prompts share
stdout with that JSON; use --inspect or --non-interactive when the output
is piped into another tool.

Modular implementation
----------------------
The logic lives in the  init_config/  package:
    init_config.detector    -- layout heuristics (monorepo, candidates, pnp)
    init_config.validator   -- location validators
    init_config.prefill     -- answers file loader
    init_config.collector   -- question flow

This file is the CLI entry point only.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from init_config.collector import AnswersValidationError, build_answers, collect_answers
from init_config.detector  import ProjectInspector
from init_config.prefill   import PrefillValidationError, load_prefill

logger = logging.getLogger("init-config")


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    fmt   = "%(asctime)s [%(levelname)-8s] %(name)s -- %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _print_header(title: str) -> None:
    width = 64
    print(f"\n{'='*width}")
    print(f"  {title}")
    print(f"{'='*width}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Init wizard for a dependency-cruiser configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--root", "-r",
        type=str,
        default=None,
        metavar="PATH",
        help="Project root to inspect (default: current directory).",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        metavar="PATH",
        help=(
            "Path to a YAML or JSON file with pre-filled answers. "
            "Values are used as defaults in interactive mode, or as the "
            "answer set in --non-interactive mode."
        ),
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Answer every question from --config and the detected layout, without prompts.",
    )
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Print the detected project layout and exit.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging (on stderr).",
    )
    return parser


def main(argv: "list[str] | None" = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    root = Path(args.root) if args.root else Path.cwd()
    if not root.is_dir():
        print(f"[ERROR] Project root is not a folder: {root}", file=sys.stderr)
        return 1

    if args.inspect:
        print(json.dumps(ProjectInspector(root).inspect(), indent=2))
        return 0

    # ---- Load pre-fill from config file ----
    prefill: dict | None = None
    if args.config:
        try:
            prefill = load_prefill(args.config)
        except (FileNotFoundError, PrefillValidationError) as exc:
            print(f"[ERROR] {exc}", file=sys.stderr)
            return 1

    if args.non_interactive:
        try:
            answers = build_answers(prefill, root)
        except AnswersValidationError as exc:
            print(f"[ERROR] Invalid answer: {exc}", file=sys.stderr)
            return 1
    else:
        _print_header("dependency-cruiser — init")
        answers = collect_answers(prefill, root)
        print()

    logger.info("Collected %d answers", len(answers))
    print(json.dumps(answers, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
