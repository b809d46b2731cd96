# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Examination identification action.

The `examine` subcommand reads a transcript, locates the start of the
examination and attributes questioning/defending roles to the attorneys.
"""

import argparse
import asyncio
from dataclasses import dataclass
from pathlib import Path

from deposition_analysis.actions.base import add_transcript_arguments
from deposition_analysis.cli_io import emit, progress, render
from deposition_analysis.config import Settings, load_llm_config
from deposition_analysis.examination import ExaminationIdentifier
from deposition_analysis.transcripts import read_transcript_text


@dataclass(frozen=True)
class ExamineAction:
    """
    `examine` subcommand.

    Prints the examination result (boundary, appearance facts, roles).
    """

    name: str = "examine"
    help: str = "Find the start of the examination and the attorney roles"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        add_transcript_arguments(parser)

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        """
        Execute the examination identification.

        Raises:
            ConfigError:
                If the credential is missing or the transcript cannot be read.
            ExtractionError:
                If the boundary extraction fails.
        """

        settings = settings or Settings()
        config = load_llm_config(settings)

        path = Path(args.file)
        text = read_transcript_text(path)
        progress(f"Identifying examination in: {path} ({len(text)} characters, model={config.model})")

        identifier = ExaminationIdentifier(config, settings)
        result = asyncio.run(identifier.identify(text))

        if result.boundary.found:
            progress(f"Examination starts on line {result.boundary.line} (offset {result.boundary.offset})")
        else:
            progress("Examination not found")

        emit(render(result.to_dict(), args.format), args.output, force=bool(args.force))
