# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""TXT/Markdown transcript loader.

Line breaks are normalized to `\n` so that character offsets reported by the
pipeline match positions in the loaded text.
"""

from __future__ import annotations

from pathlib import Path

from deposition_analysis.transcripts.base import ParserError


class TextTranscriptLoader:
    """Read .txt and .md transcripts."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".txt", ".md"}

    def read_text(self, path: Path) -> str:
        try:
            raw = path.read_text(encoding="utf-8-sig")
        except Exception as exc:  # noqa: BLE001
            raise ParserError(f"Failed to read text file: {exc}", path=path) from exc

        return raw.replace("\r\n", "\n").replace("\r", "\n")
