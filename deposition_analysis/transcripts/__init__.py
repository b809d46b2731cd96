"""Transcript loading.

The CLI reads transcripts from different source formats. Each loader converts
the source file into plain text with `\n` line breaks, which is what the
examination pipeline operates on.
"""

from deposition_analysis.transcripts.base import TranscriptLoader
from deposition_analysis.transcripts.registry import get_transcript_loader, read_transcript_text

__all__ = [
    "TranscriptLoader",
    "get_transcript_loader",
    "read_transcript_text",
]
