# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `deposition.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from deposition_analysis.config import ConfigError, Settings


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not load the YAML settings because it produces them.
    """

    name: str = "template"
    help: str = "Write a template deposition.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# All settings are optional; defaults are shown.",
            "# The API key is read from the environment (LLM_OPENAI_API_KEY or",
            "# OPENAI_API_KEY), optionally via a .env file, never from this file.",
            "",
            "# Character budgets for text sent to the language model",
            "limits:",
            "  # Transcript prefix used to find the examination start",
            "  boundary_prefix_chars: 5000",
            "  # Window after the examination start used for attorney roles",
            "  role_window_chars: 8000",
            "  # Caption prefix used by the 'caption' command",
            "  caption_chars: 3000",
            "  # Length of the examination start preview text",
            "  preview_chars: 100",
            "",
            "# Pattern fallback used when the model cannot locate the examination",
            "scanner:",
            "  # Question patterns (\"Q. ...\") only count after this line index",
            "  heuristic_min_line: 10",
            "  # ...and only on lines longer than this many characters",
            "  heuristic_min_length: 20",
            "",
            "# Model settings (override LLM_OPENAI_MODEL)",
            "# llm:",
            "#   model: gpt-4o-mini",
            "#   temperature: 0.1",
            "#   max_tokens: 1500",
            "#   timeout_seconds: 120",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="deposition.yaml",
            help="Destination path for the template (default: ./deposition.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = settings
        dest = Path(args.path)
        self._write_template(dest, force=bool(args.force))
        print(f"Wrote template config to: {dest}")

    def _write_template(self, dest: Path, *, force: bool) -> None:
        """
        Write a template YAML configuration file.

        Raises:
            ConfigError:
                If the destination exists and `force` is False.
            OSError:
                If the file cannot be written.
        """

        if dest.exists() and not force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
