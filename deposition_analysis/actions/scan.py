# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Offline pattern scan action.

The `scan` subcommand runs only the deterministic fallback scanner. It needs
neither an API key nor network access, which makes it handy for checking how a
transcript is laid out.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from deposition_analysis.actions.base import add_transcript_arguments
from deposition_analysis.cli_io import emit, render
from deposition_analysis.config import Settings
from deposition_analysis.lines import build_line_table
from deposition_analysis.scanner import scan_for_examination
from deposition_analysis.transcripts import read_transcript_text


@dataclass(frozen=True)
class ScanAction:
    """`scan` subcommand."""

    name: str = "scan"
    help: str = "Locate the examination with pattern matching only (no LLM)"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        add_transcript_arguments(parser)

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        settings = settings or Settings()

        text = read_transcript_text(Path(args.file))
        boundary = scan_for_examination(
            build_line_table(text),
            settings.scanner,
            preview_chars=settings.limits.preview_chars,
        )

        payload = {
            "examinationStartIndex": boundary.offset,
            "examinationStartLine": boundary.line,
            "examinationStartText": boundary.preview_text,
        }
        emit(render(payload, args.format), args.output, force=bool(args.force))
