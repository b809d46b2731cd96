# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Caption extraction: one model call, no fallback."""

from __future__ import annotations

import logging

from deposition_analysis.ai_llm import ExtractionError, JsonExtractor, LlmClient, LlmFailure
from deposition_analysis.assembler import build_caption_result
from deposition_analysis.config import ConfigError, LlmConfig, Settings
from deposition_analysis.prompts import SYSTEM_PROMPT, caption_prompt
from deposition_analysis.results import CaptionResult


CAPTION_MAX_TOKENS = 500

logger = logging.getLogger(__name__)


class CaptionExtractor:
    """
    Extract jurisdiction, case names, participants, attorneys and date from a
    transcript caption.
    """

    def __init__(
        self,
        config: LlmConfig,
        settings: Settings | None = None,
        *,
        extractor: JsonExtractor | None = None,
    ) -> None:
        if not isinstance(config, LlmConfig):
            raise ConfigError("CaptionExtractor requires an LlmConfig")

        self.config = config
        self.settings = settings or Settings()
        self.extractor: JsonExtractor = extractor or LlmClient(config)

    async def extract(self, caption_text: str) -> CaptionResult:
        """
        Extract caption information.

        Raises:
            ConfigError:
                If the caption text is empty.
            ExtractionError:
                If the model call fails or returns unusable JSON.
        """

        if not caption_text:
            raise ConfigError("captionText is required")

        try:
            outcome = await self.extractor.request_json(
                caption_prompt(caption_text[: self.settings.limits.caption_chars]),
                system=SYSTEM_PROMPT,
                max_tokens=CAPTION_MAX_TOKENS,
            )
        except Exception as error:  # noqa: BLE001
            logger.debug("Caption extraction raised", exc_info=True)
            raise ExtractionError(f"Caption extraction failed: {error}") from error

        if isinstance(outcome, LlmFailure):
            raise ExtractionError(outcome.message)

        return build_caption_result(outcome.data)
