# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Normalization of extractor replies.

The language model returns best-effort JSON. Every field is coerced on its
own, so a single malformed value never invalidates the rest of a reply:

- string fields become `""` when missing, null, or structured,
- list fields become `[]` unless they are lists (only caption case names wrap a
  single scalar into a one-element list),
- attorney entries are reduced to well-formed records.
"""

from __future__ import annotations

from typing import Any

from deposition_analysis.results import (
    NOT_FOUND,
    AttorneyRecord,
    Boundary,
    BoundaryStageResult,
    CaptionAttorney,
    CaptionResult,
    RoleStageResult,
)


def coerce_str(value: Any) -> str:
    """Return `value` as a stripped string, or `""` if it has no text form."""

    if value is None or isinstance(value, (dict, list, tuple, set)):
        return ""
    if isinstance(value, bool):
        return ""
    return str(value).strip()


def coerce_list(value: Any) -> list[Any]:
    """Return `value` if it is a list, else an empty list."""

    return list(value) if isinstance(value, list) else []


def coerce_str_list(value: Any, *, wrap_scalar: bool = False) -> list[str]:
    """
    Return a list of non-empty strings.

    Args:
        value:
            Raw value.
        wrap_scalar:
            If true, a non-empty scalar is wrapped into a one-element list.
    """

    if isinstance(value, list):
        items = value
    elif wrap_scalar and coerce_str(value):
        items = [value]
    else:
        items = []

    return [s for s in (coerce_str(item) for item in items) if s]


def coerce_index(value: Any) -> int:
    """
    Return an integer index, or -1 if `value` is not a usable index.

    Integral floats and decimal digit strings are accepted since models
    sometimes quote numbers. Other digit characters such as `"²"` are rejected.
    """

    if isinstance(value, bool):
        return NOT_FOUND
    if isinstance(value, int):
        return value if value >= 0 else NOT_FOUND
    if isinstance(value, float) and value.is_integer():
        return int(value) if value >= 0 else NOT_FOUND
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return NOT_FOUND


def coerce_attorneys(value: Any, *, role_key: str = "role") -> list[AttorneyRecord]:
    """
    Normalize an attorney list.

    Mapping entries keep their `name` and `role_key` values. Bare strings are
    taken as names. Entries without a name are dropped. Duplicates are kept.
    """

    out: list[AttorneyRecord] = []
    for item in coerce_list(value):
        if isinstance(item, dict):
            name = coerce_str(item.get("name"))
            role = coerce_str(item.get(role_key))
        else:
            name = coerce_str(item)
            role = ""

        if name:
            out.append(AttorneyRecord(name=name, role=role))

    return out


def build_boundary_stage(reply: Any) -> BoundaryStageResult:
    """
    Normalize the boundary extractor reply.

    Args:
        reply:
            Parsed JSON reply (any shape).

    Returns:
        Typed boundary-stage result. Missing fields take safe defaults.
    """

    data = reply if isinstance(reply, dict) else {}

    offset = coerce_index(data.get("examinationStartIndex"))
    line = coerce_index(data.get("examinationStartLine"))

    return BoundaryStageResult(
        candidate=Boundary(
            offset=offset,
            line=line,
            preview_text=coerce_str(data.get("examinationStartText")),
        ),
        deposition_date=coerce_str(data.get("depositionDate")),
        court_reporter=coerce_str(data.get("courtReporter")),
        deponent=coerce_str(data.get("deponent")),
        appearance_section=coerce_str(data.get("appearanceSection")),
        attorneys=tuple(coerce_attorneys(data.get("attorneys"))),
    )


def build_role_stage(reply: Any) -> RoleStageResult:
    """Normalize the role extractor reply."""

    data = reply if isinstance(reply, dict) else {}

    return RoleStageResult(
        questioning_attorney=coerce_str(data.get("questioningAttorney")),
        defending_attorney=coerce_str(data.get("defendingAttorney")),
        examination_attorneys=tuple(coerce_attorneys(data.get("examinationAttorneys"))),
        deposition_date=coerce_str(data.get("depositionDate")),
    )


def build_caption_result(reply: Any) -> CaptionResult:
    """Normalize the caption extractor reply."""

    data = reply if isinstance(reply, dict) else {}

    attorneys = tuple(
        CaptionAttorney(name=a.name, affiliation=a.role)
        for a in coerce_attorneys(data.get("attorneys"), role_key="affiliation")
    )

    return CaptionResult(
        jurisdiction=coerce_str(data.get("jurisdiction")),
        case_names=tuple(coerce_str_list(data.get("caseNames"), wrap_scalar=True)),
        participants=tuple(coerce_str_list(data.get("participants"))),
        attorneys=attorneys,
        deposition_date=coerce_str(data.get("depositionDate")),
    )
