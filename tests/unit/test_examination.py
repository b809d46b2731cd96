"""Tests for the examination identification pipeline."""

import asyncio

import pytest

from deposition_analysis.ai_llm import ExtractionError, LlmFailure
from deposition_analysis.config import ConfigError, LimitsConfig, LlmConfig, Settings
from deposition_analysis.examination import ExaminationIdentifier
from deposition_analysis.lines import build_line_table, offset_of_line
from tests.fakes import ScriptedExtractor, boundary_reply, make_transcript


CONFIG = LlmConfig(api_key="sk-test")

TRANSCRIPT = make_transcript(
    {
        0: "SUPERIOR COURT OF THE STATE OF CALIFORNIA",
        2: "JOHN DOE, Plaintiff, v. ACME CORP., Defendant.",
        5: "APPEARANCES:",
        6: "For Plaintiff: JANE ROE, ESQ.",
        7: "For Defendant: JOHN MAJOR, ESQ.",
        14: "EXAMINATION BY MS. ROE:",
        15: "Q. Please state your full name for the record.",
        16: "A. John Doe.",
        17: "MR. MAJOR: Objection. Vague.",
    }
)
LINES = build_line_table(TRANSCRIPT)
MARKER_OFFSET = offset_of_line(LINES, 14)

ROLE_REPLY = {
    "questioningAttorney": "Jane Roe",
    "defendingAttorney": "John Major",
    "examinationAttorneys": [
        {"name": "Jane Roe", "role": "Questioning"},
        {"name": "John Major", "role": "Defending"},
    ],
    "depositionDate": "March 1, 2024",
}


def _identify(extractor, text=TRANSCRIPT, settings=None):
    identifier = ExaminationIdentifier(CONFIG, settings, extractor=extractor)
    return asyncio.run(identifier.identify(text))


class TestBoundaryPrecedence:
    """Model first, scanner second."""

    def test_model_offset_wins(self):
        model_offset = offset_of_line(LINES, 15)
        extractor = ScriptedExtractor(
            [boundary_reply(model_offset, 15, "Q. Please state your full name"), ROLE_REPLY]
        )

        result = _identify(extractor)

        assert result.boundary.offset == model_offset
        assert result.boundary.line == 15
        assert result.boundary.preview_text == "Q. Please state your full name"

    def test_scanner_used_when_model_reports_nothing(self):
        extractor = ScriptedExtractor([boundary_reply(), ROLE_REPLY])

        result = _identify(extractor)

        assert result.boundary.line == 14
        assert result.boundary.offset == MARKER_OFFSET
        assert result.boundary.preview_text == "EXAMINATION BY MS. ROE:"

    @pytest.mark.parametrize("index", ["²", "١٢x", [3], {"offset": 3}])
    def test_malformed_model_offset_falls_back_to_scanner(self, index):
        extractor = ScriptedExtractor([boundary_reply(index=index, line="²"), ROLE_REPLY])

        result = _identify(extractor)

        assert result.boundary.line == 14
        assert result.boundary.offset == MARKER_OFFSET

    def test_not_found_skips_role_stage(self):
        text = make_transcript({3: "Q. Please state your name for the record."})
        extractor = ScriptedExtractor([boundary_reply()])

        result = _identify(extractor, text)

        assert result.to_dict()["examinationStartIndex"] == -1
        assert result.to_dict()["examinationStartLine"] == -1
        assert result.examination_attorneys == ()
        assert len(extractor.calls) == 1


class TestRoleStage:
    """Second model call on the examination window."""

    def test_roles_attributed(self):
        extractor = ScriptedExtractor(
            [
                boundary_reply(
                    depositionDate="Jan 1, 2024",
                    courtReporter="Mary Major, CSR",
                    deponent="John Doe",
                    attorneys=[{"name": "Jane Roe", "role": "Attorney for Plaintiff"}],
                ),
                ROLE_REPLY,
            ]
        )

        data = _identify(extractor).to_dict()

        assert data["questioningAttorney"] == "Jane Roe"
        assert data["defendingAttorney"] == "John Major"
        assert data["examinationAttorneys"][1] == {"name": "John Major", "role": "Defending"}
        assert data["attorneys"] == [{"name": "Jane Roe", "role": "Attorney for Plaintiff"}]
        assert data["depositionDate"] == "Jan 1, 2024"
        assert data["courtReporter"] == "Mary Major, CSR"
        assert data["deponent"] == "John Doe"

    def test_role_window_starts_at_boundary(self):
        extractor = ScriptedExtractor([boundary_reply(), ROLE_REPLY])

        _identify(extractor)

        role_prompt = extractor.calls[1].prompt
        assert role_prompt.endswith(TRANSCRIPT[MARKER_OFFSET:])
        assert "APPEARANCES:" not in role_prompt

    def test_role_window_is_capped(self):
        text = "EXAMINATION BY MS. ROE:\n" + "Q. Question and answer line.\n" * 1000
        extractor = ScriptedExtractor([boundary_reply(), ROLE_REPLY])

        _identify(extractor, text)

        role_prompt = extractor.calls[1].prompt
        assert role_prompt.endswith(text[:8000])
        assert not role_prompt.endswith(text[:8001])

    @pytest.mark.parametrize(
        "failure",
        [
            LlmFailure("OpenAI API Error: 500 - Internal error"),
            LlmFailure("AI returned invalid JSON format", raw="oops"),
            RuntimeError("connection reset"),
        ],
    )
    def test_role_failure_is_isolated(self, failure):
        extractor = ScriptedExtractor(
            [
                boundary_reply(
                    depositionDate="Jan 1, 2024",
                    courtReporter="Mary Major, CSR",
                    attorneys=[{"name": "Jane Roe", "role": "Attorney for Plaintiff"}],
                ),
                failure,
            ]
        )

        result = _identify(extractor)

        assert result.boundary.offset == MARKER_OFFSET
        assert result.boundary.line == 14
        assert result.deposition_date == "Jan 1, 2024"
        assert result.court_reporter == "Mary Major, CSR"
        assert len(result.attorneys) == 1
        assert result.questioning_attorney == ""
        assert result.defending_attorney == ""
        assert result.examination_attorneys == ()


class TestDatePrecedence:
    """Appearance-section date versus examination date."""

    @pytest.mark.parametrize(
        "appearance_date,expected",
        [
            ("", "March 1, 2024"),
            ("Jan 1, 2024", "Jan 1, 2024"),
        ],
    )
    def test_date_precedence(self, appearance_date, expected):
        extractor = ScriptedExtractor([boundary_reply(depositionDate=appearance_date), ROLE_REPLY])
        assert _identify(extractor).deposition_date == expected


class TestFailures:
    """Fatal and non-fatal error paths."""

    def test_primary_failure_is_fatal(self):
        extractor = ScriptedExtractor([LlmFailure("OpenAI API Error: 401 - Incorrect API key provided")])

        with pytest.raises(ExtractionError, match="401"):
            _identify(extractor)

        assert len(extractor.calls) == 1

    def test_primary_invalid_json_is_fatal(self):
        extractor = ScriptedExtractor([LlmFailure("AI returned invalid JSON format", raw="nope")])

        with pytest.raises(ExtractionError, match="invalid JSON"):
            _identify(extractor)

    def test_primary_exception_becomes_extraction_error(self):
        extractor = ScriptedExtractor([RuntimeError("connection reset")])

        with pytest.raises(ExtractionError, match="connection reset"):
            _identify(extractor)

        assert len(extractor.calls) == 1

    def test_empty_transcript_rejected_before_any_call(self):
        extractor = ScriptedExtractor()

        with pytest.raises(ConfigError):
            _identify(extractor, "")

        assert extractor.calls == []

    def test_missing_credential_rejected_at_construction(self):
        with pytest.raises(ConfigError):
            ExaminationIdentifier(LlmConfig(api_key=""), extractor=ScriptedExtractor())

    def test_config_type_checked(self):
        with pytest.raises(ConfigError):
            ExaminationIdentifier(None, extractor=ScriptedExtractor())


class TestPrompts:
    """Text handed to the boundary extractor."""

    def test_boundary_prompt_uses_prefix_only(self):
        text = TRANSCRIPT + "\n" + "x" * 6000 + "UNIQUE-TAIL-TOKEN"
        extractor = ScriptedExtractor([boundary_reply(), ROLE_REPLY])

        _identify(extractor, text)

        boundary_prompt = extractor.calls[0].prompt
        assert text[:5000] in boundary_prompt
        assert "UNIQUE-TAIL-TOKEN" not in boundary_prompt

    def test_custom_limits(self):
        settings = Settings(limits=LimitsConfig(boundary_prefix_chars=50, role_window_chars=10))
        extractor = ScriptedExtractor([boundary_reply(), ROLE_REPLY])

        _identify(extractor, settings=settings)

        assert extractor.calls[0].prompt.endswith(TRANSCRIPT[:50])
        assert extractor.calls[1].prompt.endswith(TRANSCRIPT[MARKER_OFFSET : MARKER_OFFSET + 10])


class TestIdempotence:
    """Same input and replies, same result."""

    def test_repeatable(self):
        def run():
            extractor = ScriptedExtractor([boundary_reply(depositionDate="Jan 1, 2024"), ROLE_REPLY])
            return _identify(extractor)

        assert run() == run()
        assert run().to_dict() == run().to_dict()
