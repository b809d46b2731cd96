"""
Deposition analysis package.

This package locates, within a deposition transcript, the boundary between the
appearance section and the examination, and attributes questioning/defending
roles to the attorneys present:
- a language model proposes the boundary and appearance facts,
- a deterministic pattern scan provides the fallback,
- a second model call on the examination window attributes attorney roles.
"""

from __future__ import annotations

from deposition_analysis.caption import CaptionExtractor
from deposition_analysis.config import ConfigError, LlmConfig, Settings, load_llm_config, load_settings
from deposition_analysis.ai_llm import ExtractionError
from deposition_analysis.examination import ExaminationIdentifier, identify_examination
from deposition_analysis.results import Boundary, CaptionResult, ExaminationResult

__all__ = [
    "Boundary",
    "CaptionExtractor",
    "CaptionResult",
    "ConfigError",
    "ExaminationIdentifier",
    "ExaminationResult",
    "ExtractionError",
    "LlmConfig",
    "Settings",
    "identify_examination",
    "load_llm_config",
    "load_settings",
]
