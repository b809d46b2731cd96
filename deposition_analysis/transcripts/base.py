# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Transcript loader interface."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class TranscriptLoader(Protocol):
    """Interface for transcript file loading.

    Implementations only extract plain text. Locating sections is left to the
    pipeline.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this loader supports the given file."""

        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        """Return the transcript as plain text with `\\n` line breaks."""

        raise NotImplementedError


@dataclass(frozen=True)
class ParserError(RuntimeError):
    """Raised for transcript loading errors."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:  # pragma: no cover
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message
