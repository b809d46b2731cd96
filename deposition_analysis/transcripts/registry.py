# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Transcript loader registry."""

from __future__ import annotations

from pathlib import Path

from deposition_analysis.config import ConfigError
from deposition_analysis.transcripts.base import ParserError, TranscriptLoader
from deposition_analysis.transcripts.odt_parser import OdtTranscriptLoader
from deposition_analysis.transcripts.text_parser import TextTranscriptLoader


_LOADERS: list[TranscriptLoader] = [
    OdtTranscriptLoader(),
    TextTranscriptLoader(),
]


def get_transcript_loader(path: Path) -> TranscriptLoader:
    """Select a transcript loader based on the file.

    Args:
        path:
            Transcript file path.

    Returns:
        A loader instance.

    Raises:
        ConfigError:
            If no loader supports the file.
    """

    for loader in _LOADERS:
        if loader.can_read(path):
            return loader

    supported = ", ".join(sorted({".odt", ".txt", ".md"}))
    raise ConfigError(f"Unsupported transcript format: {path} (supported: {supported})")


def read_transcript_text(path: Path) -> str:
    """Read a transcript and normalize errors to ConfigError."""

    if not path.is_file():
        raise ConfigError(f"Transcript file not found: {path}")

    loader = get_transcript_loader(path)
    try:
        return loader.read_text(path)
    except ParserError as exc:
        raise ConfigError(str(exc)) from exc
