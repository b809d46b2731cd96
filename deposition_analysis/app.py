"""
CLI entrypoint for the deposition analysis tool.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from deposition_analysis.actions.caption import CaptionAction
from deposition_analysis.actions.check import CheckAction
from deposition_analysis.actions.examine import ExamineAction
from deposition_analysis.actions.scan import ScanAction
from deposition_analysis.actions.template import TemplateAction
from deposition_analysis.ai_llm import ExtractionError
from deposition_analysis.config import ConfigError, find_config_path, load_settings


def _action_repository():
    """
    Construct the action registry.

    Returns:
        A mapping from subcommand name to an action instance.
    """

    actions = [
        TemplateAction(),
        CheckAction(),
        ScanAction(),
        ExamineAction(),
        CaptionAction(),
    ]
    return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the top-level argument parser.

    The parser uses subcommands (similar to `git`) where each action registers its
    own arguments.

    Returns:
        The configured ArgumentParser instance.
    """

    parser = argparse.ArgumentParser(
        prog="deposition-analysis",
        description=(
            "Locate the examination section of deposition transcripts and identify attorney roles."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    actions = _action_repository()

    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument(
        "--config",
        "-c",
        help=(
            "Path to deposition.yaml. If omitted, ./deposition.yaml is used when present."
        ),
    )

    subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

    for name, action in actions.items():
        parents = [config_parent] if action.requires_config else []
        sub = subparsers.add_parser(name, help=action.help, parents=parents)
        action.add_arguments(sub)
        sub.set_defaults(_action_name=name)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv:
            Optional argument list (without program name). If omitted, argparse
            reads from sys.argv.

    Returns:
        Process exit code. `0` on success, `1` if a mandatory model call
        failed, `2` on configuration/usage errors.
    """

    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        actions = _action_repository()
        action_name = getattr(args, "_action_name", None)
        if not action_name or action_name not in actions:
            parser.error("Unknown or missing command")
            return 2

        action = actions[action_name]

        settings = None
        if action.requires_config:
            config_path, explicit = find_config_path(getattr(args, "config", None))
            settings = load_settings(config_path, required=explicit)

        action.run(args, settings)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ExtractionError as exc:
        print(f"extraction failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
