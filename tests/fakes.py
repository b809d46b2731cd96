"""Test doubles shared by the unit and integration tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from deposition_analysis.ai_llm import LlmFailure, LlmOutcome, LlmSuccess


@dataclass
class RecordedCall:
    prompt: str
    system: str
    max_tokens: int | None


@dataclass
class ScriptedExtractor:
    """Returns (or raises) the scripted outcomes in order and records each call."""

    outcomes: list[Any] = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)

    async def request_json(
        self,
        prompt: str,
        *,
        system: str,
        max_tokens: int | None = None,
    ) -> LlmOutcome:
        self.calls.append(RecordedCall(prompt, system, max_tokens))
        if not self.outcomes:
            raise AssertionError("Unexpected extractor call")

        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, (LlmSuccess, LlmFailure)):
            return outcome
        return LlmSuccess(outcome)


def boundary_reply(
    index: int = -1,
    line: int = -1,
    text: str = "",
    **fields: Any,
) -> dict[str, Any]:
    reply: dict[str, Any] = {
        "examinationStartIndex": index,
        "examinationStartLine": line,
        "examinationStartText": text,
        "depositionDate": "",
        "courtReporter": "",
        "attorneys": [],
        "deponent": "",
        "appearanceSection": "",
    }
    reply.update(fields)
    return reply


def make_transcript(
    body: dict[int, str],
    *,
    total_lines: int = 40,
    filler: str = "the proceedings continue",
) -> str:
    """Build a transcript with `total_lines` lines; `body` places text on given lines."""

    lines = [body.get(i, f"{filler} {i}") for i in range(total_lines)]
    return "\n".join(lines)
