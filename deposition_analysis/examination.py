# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Examination identification pipeline.

Locates the boundary between the appearance section and the examination of a
deposition transcript and attributes questioning/defending roles:

1. Boundary extraction by the language model on the transcript prefix.
   Failure is fatal (`ExtractionError`).
2. Fallback pattern scan over all lines. Always runs.
3. Boundary resolution (model first, scanner second).
4. Role extraction by the language model on a window starting at the
   boundary. Only runs if a boundary was found. Failure only empties the role
   fields.
5. Result assembly.

The two model calls are strictly sequential because the second one depends on
the resolved boundary.
"""

from __future__ import annotations

import logging

from deposition_analysis.ai_llm import (
    ExtractionError,
    JsonExtractor,
    LlmClient,
    LlmFailure,
    LlmOutcome,
)
from deposition_analysis.assembler import build_boundary_stage
from deposition_analysis.config import ConfigError, LlmConfig, Settings
from deposition_analysis.lines import build_line_table
from deposition_analysis.prompts import SYSTEM_PROMPT, boundary_prompt, role_prompt
from deposition_analysis.resolver import resolve_boundary
from deposition_analysis.results import ExaminationResult
from deposition_analysis.roles import (
    examination_window,
    merge_examination_result,
    role_stage_from_outcome,
)
from deposition_analysis.scanner import scan_for_examination


logger = logging.getLogger(__name__)


class ExaminationIdentifier:
    """
    Entry point of the examination identification.

    Args:
        config:
            Validated model settings. Required even if `extractor` is given so
            that a missing credential is reported before any call.
        settings:
            Optional tuning (character budgets, scanner heuristics).
        extractor:
            Optional JSON extractor replacing the OpenAI client.
    """

    def __init__(
        self,
        config: LlmConfig,
        settings: Settings | None = None,
        *,
        extractor: JsonExtractor | None = None,
    ) -> None:
        if not isinstance(config, LlmConfig):
            raise ConfigError("ExaminationIdentifier requires an LlmConfig")

        self.config = config
        self.settings = settings or Settings()
        self.extractor: JsonExtractor = extractor or LlmClient(config)

    async def identify(self, transcript_text: str) -> ExaminationResult:
        """
        Run the pipeline on one transcript.

        Args:
            transcript_text:
                Full transcript as plain text.

        Returns:
            The examination result. A not-found boundary is a valid result.

        Raises:
            ConfigError:
                If the transcript text is empty.
            ExtractionError:
                If the boundary extraction call fails.
        """

        if not transcript_text:
            raise ConfigError("transcriptText is required")

        limits = self.settings.limits
        lines = build_line_table(transcript_text)

        outcome = await self._request_boundary(transcript_text[: limits.boundary_prefix_chars])
        if isinstance(outcome, LlmFailure):
            raise ExtractionError(outcome.message)

        stage = build_boundary_stage(outcome.data)

        scanned = scan_for_examination(
            lines,
            self.settings.scanner,
            preview_chars=limits.preview_chars,
        )

        boundary = resolve_boundary(
            stage.candidate,
            scanned,
            lines,
            text_length=len(transcript_text),
            preview_chars=limits.preview_chars,
        )

        role_outcome: LlmOutcome | None = None
        if boundary.found:
            role_outcome = await self._request_roles(
                examination_window(transcript_text, boundary, limits.role_window_chars)
            )

        return merge_examination_result(stage, boundary, role_stage_from_outcome(role_outcome))

    async def _request_boundary(self, prefix: str) -> LlmOutcome:
        """Call the boundary extractor. Raised errors become a failure outcome."""

        try:
            return await self.extractor.request_json(boundary_prompt(prefix), system=SYSTEM_PROMPT)
        except Exception as error:  # noqa: BLE001
            logger.debug("Boundary extraction raised", exc_info=True)
            return LlmFailure(f"Boundary extraction failed: {error}")

    async def _request_roles(self, window: str) -> LlmOutcome:
        """Call the role extractor. Never raises."""

        try:
            return await self.extractor.request_json(role_prompt(window), system=SYSTEM_PROMPT)
        except Exception as error:  # noqa: BLE001
            logger.debug("Role extraction raised", exc_info=True)
            return LlmFailure(f"Role extraction failed: {error}")


async def identify_examination(
    transcript_text: str,
    config: LlmConfig,
    settings: Settings | None = None,
) -> ExaminationResult:
    """Convenience wrapper around `ExaminationIdentifier.identify()`."""

    return await ExaminationIdentifier(config, settings).identify(transcript_text)
