# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Typed values passed between the pipeline stages.

Every value is created per request and never mutated. `to_dict()` produces the
camelCase output shape returned to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


NOT_FOUND = -1


@dataclass(frozen=True)
class Boundary:
    """
    Start of the examination section.

    Attributes:
        offset:
            Character offset in the transcript, or -1 if not found.
        line:
            Zero-based line number, or -1 if not found.
        preview_text:
            Text at the start of the examination (usually the boundary line).
    """

    offset: int = NOT_FOUND
    line: int = NOT_FOUND
    preview_text: str = ""

    @property
    def found(self) -> bool:
        return self.offset >= 0

    @classmethod
    def not_found(cls) -> "Boundary":
        return cls(NOT_FOUND, NOT_FOUND, "")


@dataclass(frozen=True)
class AttorneyRecord:
    """Attorney name with a role label (free text, "Questioning", "Defending", ...)."""

    name: str
    role: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "role": self.role}


@dataclass(frozen=True)
class CaptionAttorney:
    """Attorney name with the party they represent."""

    name: str
    affiliation: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "affiliation": self.affiliation}


@dataclass(frozen=True)
class BoundaryStageResult:
    """
    Normalized reply of the boundary extractor.

    `candidate` holds the extractor's own boundary guess, which may be the
    not-found sentinel.
    """

    candidate: Boundary = field(default_factory=Boundary.not_found)
    deposition_date: str = ""
    court_reporter: str = ""
    deponent: str = ""
    appearance_section: str = ""
    attorneys: tuple[AttorneyRecord, ...] = ()


@dataclass(frozen=True)
class RoleStageResult:
    """Normalized reply of the role extractor."""

    questioning_attorney: str = ""
    defending_attorney: str = ""
    examination_attorneys: tuple[AttorneyRecord, ...] = ()
    deposition_date: str = ""


@dataclass(frozen=True)
class ExaminationResult:
    """Final result of the examination identification."""

    boundary: Boundary = field(default_factory=Boundary.not_found)
    deposition_date: str = ""
    court_reporter: str = ""
    deponent: str = ""
    appearance_section: str = ""
    attorneys: tuple[AttorneyRecord, ...] = ()
    questioning_attorney: str = ""
    defending_attorney: str = ""
    examination_attorneys: tuple[AttorneyRecord, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "examinationStartIndex": self.boundary.offset,
            "examinationStartLine": self.boundary.line,
            "examinationStartText": self.boundary.preview_text,
            "depositionDate": self.deposition_date,
            "courtReporter": self.court_reporter,
            "attorneys": [a.to_dict() for a in self.attorneys],
            "deponent": self.deponent,
            "appearanceSection": self.appearance_section,
            "questioningAttorney": self.questioning_attorney,
            "defendingAttorney": self.defending_attorney,
            "examinationAttorneys": [a.to_dict() for a in self.examination_attorneys],
        }


@dataclass(frozen=True)
class CaptionResult:
    """Result of the caption extraction."""

    jurisdiction: str = ""
    case_names: tuple[str, ...] = ()
    participants: tuple[str, ...] = ()
    attorneys: tuple[CaptionAttorney, ...] = ()
    deposition_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "jurisdiction": self.jurisdiction,
            "caseNames": list(self.case_names),
            "participants": list(self.participants),
            "attorneys": [a.to_dict() for a in self.attorneys],
            "depositionDate": self.deposition_date,
        }
