# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Fold the role extractor outcome into the final result.

A failed role call only empties the role fields; the boundary and the
appearance-section facts are always kept.
"""

from __future__ import annotations

import logging

from deposition_analysis.ai_llm import LlmFailure, LlmOutcome, LlmSuccess
from deposition_analysis.assembler import build_role_stage
from deposition_analysis.results import (
    Boundary,
    BoundaryStageResult,
    ExaminationResult,
    RoleStageResult,
)


logger = logging.getLogger(__name__)


def examination_window(text: str, boundary: Boundary, limit: int = 8000) -> str:
    """Return up to `limit` characters of `text` starting at the boundary."""

    if not boundary.found:
        return ""
    return text[boundary.offset : boundary.offset + limit]


def merge_dates(appearance_date: str, examination_date: str) -> str:
    """The appearance-section date wins; the examination date only fills a gap."""

    if not appearance_date and examination_date:
        return examination_date
    return appearance_date


def role_stage_from_outcome(outcome: LlmOutcome | None) -> RoleStageResult:
    """
    Turn a role extractor outcome into role fields.

    Args:
        outcome:
            Outcome of the role call, or None if it was not made.

    Returns:
        Normalized role fields. Empty on failure.
    """

    if isinstance(outcome, LlmSuccess):
        return build_role_stage(outcome.data)

    if isinstance(outcome, LlmFailure):
        logger.warning("Role attribution failed, continuing without roles: %s", outcome.message)

    return RoleStageResult()


def merge_examination_result(
    stage: BoundaryStageResult,
    boundary: Boundary,
    roles: RoleStageResult,
) -> ExaminationResult:
    """
    Combine the boundary-stage facts, the resolved boundary and the role fields.

    Args:
        stage:
            Normalized boundary extractor reply.
        boundary:
            Resolved boundary.
        roles:
            Role fields (empty if the role stage failed or was skipped).

    Returns:
        The final examination result.
    """

    return ExaminationResult(
        boundary=boundary,
        deposition_date=merge_dates(stage.deposition_date, roles.deposition_date),
        court_reporter=stage.court_reporter,
        deponent=stage.deponent,
        appearance_section=stage.appearance_section,
        attorneys=stage.attorneys,
        questioning_attorney=roles.questioning_attorney,
        defending_attorney=roles.defending_attorney,
        examination_attorneys=roles.examination_attorneys,
    )
