# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Low-level LLM API wrapper.

This module encapsulates the direct OpenAI SDK calls. Callers never see SDK
exceptions: every call returns either `LlmSuccess` with the parsed JSON object
or `LlmFailure` with a human-readable message, so the pipeline can decide per
stage whether a failure is fatal or recoverable.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, cast

import openai
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam

from deposition_analysis.config import LlmConfig


logger = logging.getLogger(__name__)

JsonValue: TypeAlias = (
    dict[str, "JsonValue"]
    | list["JsonValue"]
    | str
    | int
    | float
    | bool
    | None
)

_FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)


class ExtractionError(RuntimeError):
    """
    Raised when a mandatory extraction call fails (network error, error
    status, or unparsable reply).
    """

    pass


@dataclass(frozen=True)
class LlmSuccess:
    """Successful call. `data` is the parsed JSON object."""

    data: dict[str, JsonValue]


@dataclass(frozen=True)
class LlmFailure:
    """
    Failed call.

    Attributes:
        message:
            Error description suitable for the user.
        raw:
            Raw reply text if the model answered but the reply was unusable.
    """

    message: str
    raw: str | None = None


LlmOutcome: TypeAlias = LlmSuccess | LlmFailure


class JsonExtractor(Protocol):
    """Interface of anything that can answer a prompt with a JSON object."""

    async def request_json(
        self,
        prompt: str,
        *,
        system: str,
        max_tokens: int | None = None,
    ) -> LlmOutcome:
        ...


def strip_code_fences(content: str) -> str:
    """Remove Markdown code fence markers (```json / ```) from a reply."""

    return _FENCE_RE.sub("", content).strip()


def parse_json_reply(content: str) -> LlmOutcome:
    """
    Parse a model reply into a JSON object.

    Args:
        content:
            Raw reply text, possibly wrapped in code fences.

    Returns:
        `LlmSuccess` if the cleaned reply is a JSON object, else `LlmFailure`.
    """

    cleaned = strip_code_fences(content)
    try:
        value = cast(JsonValue, json.loads(cleaned))
    except json.JSONDecodeError as error:
        logger.error("Failed to parse AI response: %s (%s)", content, error)
        return LlmFailure("AI returned invalid JSON format", raw=content)

    if not isinstance(value, dict):
        logger.error("AI response is not a JSON object: %s", content)
        return LlmFailure("AI returned invalid JSON format", raw=content)

    return LlmSuccess(value)


class LlmClient:
    """
    Chat completion client bound to one `LlmConfig`.

    Args:
        config:
            Validated connection settings.
        client:
            Optional pre-built SDK client (mainly for tests).
    """

    def __init__(self, config: LlmConfig, client: AsyncOpenAI | None = None) -> None:
        self.config = config

        if client is None:
            kwargs: dict[str, Any] = {"api_key": config.api_key}
            if config.base_url:
                kwargs["base_url"] = config.base_url
            if config.timeout_seconds is not None:
                kwargs["timeout"] = config.timeout_seconds
            client = AsyncOpenAI(**kwargs)

        self._client = client

    async def request_json(
        self,
        prompt: str,
        *,
        system: str,
        max_tokens: int | None = None,
    ) -> LlmOutcome:
        """
        Send a system/user prompt pair and parse the JSON reply.

        Args:
            prompt:
                User message.
            system:
                System message.
            max_tokens:
                Reply length limit. Defaults to the configured value.

        Returns:
            `LlmSuccess` or `LlmFailure`. Never raises for API or parse errors.
        """

        messages: list[ChatCompletionMessageParam] = [
            {"role": "system", "content": system},
            {"role": "user", "content": prompt},
        ]

        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                messages=messages,
                temperature=self.config.temperature,
                max_tokens=max_tokens or self.config.max_tokens,
            )
        except openai.APIStatusError as error:
            return LlmFailure(f"OpenAI API Error: {error.status_code} - {_status_message(error)}")
        except openai.OpenAIError as error:
            return LlmFailure(f"Error calling the OpenAI API: {error}")

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""

        if not content.strip():
            content = "{}"

        return parse_json_reply(content)


def _status_message(error: openai.APIStatusError) -> str:
    """Extract the error message from an API error body."""

    body = error.body
    if isinstance(body, dict):
        inner = body.get("error") if isinstance(body.get("error"), dict) else body
        message = inner.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return error.message
