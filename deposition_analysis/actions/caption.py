# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Caption extraction action.
"""

import argparse
import asyncio
from dataclasses import dataclass
from pathlib import Path

from deposition_analysis.actions.base import add_transcript_arguments
from deposition_analysis.caption import CaptionExtractor
from deposition_analysis.cli_io import emit, progress, render
from deposition_analysis.config import Settings, load_llm_config
from deposition_analysis.transcripts import read_transcript_text


@dataclass(frozen=True)
class CaptionAction:
    """`caption` subcommand."""

    name: str = "caption"
    help: str = "Extract court, case names, parties, attorneys and date from the caption"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        add_transcript_arguments(parser)

    def run(self, args: argparse.Namespace, settings: Settings | None) -> None:
        settings = settings or Settings()
        config = load_llm_config(settings)

        path = Path(args.file)
        text = read_transcript_text(path)
        progress(f"Extracting caption from: {path}")

        result = asyncio.run(CaptionExtractor(config, settings).extract(text))
        emit(render(result.to_dict(), args.format), args.output, force=bool(args.force))
