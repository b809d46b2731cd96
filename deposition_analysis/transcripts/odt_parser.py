# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""ODT transcript loader."""

from __future__ import annotations

from pathlib import Path

from odfdo import Document

from deposition_analysis.transcripts.base import ParserError


class OdtTranscriptLoader:
    """Read ODT files as plain text, one line per paragraph/heading."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_text(self, path: Path) -> str:
        try:
            doc = Document(path)
            body = doc.body

            # XPath also finds paragraphs nested in lists, tables and frames,
            # which `get_paragraphs()` misses in converted documents.
            nodes = list(body.xpath(".//text:p | .//text:h"))
            if not nodes:
                nodes = list(body.get_paragraphs())

            lines = [_node_text(n) for n in nodes]
        except Exception as exc:  # noqa: BLE001
            raise ParserError(f"Failed to parse ODT file: {exc}", path=path) from exc

        return "\n".join(line.replace("\r\n", " ").replace("\n", " ") for line in lines)


def _node_text(node: object) -> str:
    # odfdo paragraphs expose the full text (including spans) via
    # `inner_text`/`text_recursive` rather than `.text`.
    for attr in ("inner_text", "text_recursive", "text"):
        value = getattr(node, attr, None)
        if callable(value):
            value = value()
        if value is not None:
            return str(value)
    return ""
