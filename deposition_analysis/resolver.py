# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Merge the model's boundary guess with the fallback scanner result.

Precedence:

1. A model offset `>= 0` (and inside the text) decides offset and line. The
   scanner result only contributes the preview text if the model gave none.
2. Otherwise the scanner result decides. If the scanner found nothing either,
   the examination is reported as not found.

When neither source supplies preview text for a resolved boundary, the first
characters of the boundary line are used.
"""

from __future__ import annotations

import logging

from deposition_analysis.lines import line_of_offset, preview_of_line
from deposition_analysis.results import Boundary


logger = logging.getLogger(__name__)


def resolve_boundary(
    candidate: Boundary,
    scanned: Boundary,
    lines: list[str],
    *,
    text_length: int,
    preview_chars: int = 100,
) -> Boundary:
    """
    Decide the authoritative examination boundary.

    Args:
        candidate:
            Boundary reported by the language model (may be the sentinel).
        scanned:
            Boundary found by the fallback scanner (may be the sentinel).
        lines:
            Line table of the transcript.
        text_length:
            Length of the transcript. Model offsets beyond it are ignored.
        preview_chars:
            Length of the default preview text.

    Returns:
        The resolved boundary, or the not-found sentinel.
    """

    if candidate.offset >= 0 and candidate.offset > text_length:
        logger.warning(
            "Ignoring model offset %d beyond end of transcript (%d chars)",
            candidate.offset,
            text_length,
        )
        candidate = Boundary.not_found()

    if candidate.offset >= 0:
        line = candidate.line
        if line < 0 or line >= len(lines):
            line = line_of_offset(lines, candidate.offset)

        preview = candidate.preview_text or scanned.preview_text
        if not preview:
            preview = preview_of_line(lines, line, preview_chars)

        logger.debug("Using model boundary at offset %d (line %d)", candidate.offset, line)
        return Boundary(offset=candidate.offset, line=line, preview_text=preview)

    if scanned.offset >= 0:
        preview = scanned.preview_text or preview_of_line(lines, scanned.line, preview_chars)
        logger.debug("Using scanner boundary at offset %d (line %d)", scanned.offset, scanned.line)
        return Boundary(offset=scanned.offset, line=scanned.line, preview_text=preview)

    logger.debug("Examination not found")
    return Boundary.not_found()
