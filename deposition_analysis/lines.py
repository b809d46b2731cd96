# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Line table and character offset bookkeeping.

Lines are split on `\\n` only and offsets count one separator character per
line. Text with `\\r\\n` line breaks is not normalized: each line keeps its
trailing `\\r`, which keeps offsets exact but leaves the `\\r` in line and
preview text.
"""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate


def build_line_table(text: str) -> list[str]:
    """Split transcript text into lines on `\\n`."""

    return text.split("\n")


def offset_of_line(lines: list[str], line_number: int) -> int:
    """Return the character offset at which `line_number` starts.

    Args:
        lines:
            Line table from `build_line_table()`.
        line_number:
            Zero-based line index. Must be within `0..len(lines)`.

    Returns:
        Sum of `len(line) + 1` over all lines before `line_number`.
    """

    return sum(len(line) + 1 for line in lines[:line_number])


def line_of_offset(lines: list[str], offset: int) -> int:
    """Return the line containing the character `offset`.

    Offsets pointing at a separator belong to the line the separator ends.
    Offsets past the end of the text map to the last line.
    """

    if not lines:
        return 0

    starts = [0, *accumulate(len(line) + 1 for line in lines[:-1])]
    return max(0, bisect_right(starts, max(0, offset)) - 1)


def preview_of_line(lines: list[str], line_number: int, limit: int = 100) -> str:
    """Return the first `limit` characters of a line (empty if out of range)."""

    if line_number < 0 or line_number >= len(lines):
        return ""
    return lines[line_number][:limit]
