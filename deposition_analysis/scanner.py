# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Deterministic search for the start of the examination.

Two passes over the line table:

1. Explicit section markers (`EXAMINATION BY ...`, `DIRECT EXAMINATION`, ...)
   on any line, including the first ones.
2. Only if no marker exists anywhere: question-start patterns (`Q. ...`,
   `BY MR. SMITH: ...`) on lines past the caption/appearance area.

The first matching line of the first successful pass wins.
"""

from __future__ import annotations

import logging
import re

from deposition_analysis.config import ScannerConfig
from deposition_analysis.lines import offset_of_line, preview_of_line
from deposition_analysis.results import Boundary


logger = logging.getLogger(__name__)


_MARKER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^EXAMINATION(?:\s+(?:BY|OF))?"),
    re.compile(r"^TESTIMONY(?:\s+(?:BY|OF))?"),
    re.compile(r"^DIRECT\s+EXAMINATION"),
    re.compile(r"^CROSS\s+EXAMINATION"),
    re.compile(r"^EXAMINATION\s+BY\s+[A-Z]"),
)

# A name token is a capitalized word, optionally with periods/apostrophes/
# hyphens (MR., O'BRIEN, SMITH-JONES). Several tokens may follow "BY".
_QUESTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^Q\.\s"),
    re.compile(r"^Q\s"),
    re.compile(r"^BY\s+[A-Z][\w.'\-]*(?:\s+[A-Z][\w.'\-]*)*:\s*[A-Z]"),
)


def is_examination_marker(line: str) -> bool:
    """Return True if the trimmed line is an explicit examination heading."""

    stripped = line.strip()
    return any(p.match(stripped) for p in _MARKER_PATTERNS)


def is_question_start(line: str, *, min_length: int = 20) -> bool:
    """Return True if the trimmed line looks like the first question."""

    stripped = line.strip()
    if len(stripped) <= min_length:
        return False
    return any(p.match(stripped) for p in _QUESTION_PATTERNS)


def scan_for_examination(
    lines: list[str],
    config: ScannerConfig | None = None,
    *,
    preview_chars: int = 100,
) -> Boundary:
    """
    Find the most probable examination start without the language model.

    Args:
        lines:
            Line table of the transcript.
        config:
            Heuristic tuning. Defaults to `ScannerConfig()`.
        preview_chars:
            Length of the returned preview text.

    Returns:
        Boundary of the first matching line, or the not-found sentinel.
    """

    config = config or ScannerConfig()

    for idx, line in enumerate(lines):
        if is_examination_marker(line):
            logger.debug("Examination marker found on line %d: %r", idx, line.strip())
            return _boundary_at(lines, idx, preview_chars)

    for idx in range(config.heuristic_min_line + 1, len(lines)):
        if is_question_start(lines[idx], min_length=config.heuristic_min_length):
            logger.debug("Question pattern found on line %d: %r", idx, lines[idx].strip())
            return _boundary_at(lines, idx, preview_chars)

    logger.debug("No examination marker or question pattern in %d line(s)", len(lines))
    return Boundary.not_found()


def _boundary_at(lines: list[str], idx: int, preview_chars: int) -> Boundary:
    return Boundary(
        offset=offset_of_line(lines, idx),
        line=idx,
        preview_text=preview_of_line(lines, idx, preview_chars),
    )
