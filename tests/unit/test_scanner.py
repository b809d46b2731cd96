"""Tests for the deterministic examination scanner."""

import pytest

from deposition_analysis.config import ScannerConfig
from deposition_analysis.lines import build_line_table, offset_of_line
from deposition_analysis.scanner import (
    is_examination_marker,
    is_question_start,
    scan_for_examination,
)
from tests.fakes import make_transcript


class TestMarkers:
    """Explicit examination headings."""

    @pytest.mark.parametrize(
        "line",
        [
            "EXAMINATION",
            "EXAMINATION BY MR. SMITH:",
            "EXAMINATION OF JANE DOE",
            "   EXAMINATION BY MS. JONES   ",
            "TESTIMONY",
            "TESTIMONY OF JANE DOE",
            "DIRECT EXAMINATION",
            "CROSS EXAMINATION",
        ],
    )
    def test_markers_match(self, line):
        assert is_examination_marker(line)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "Examination by Mr. Smith",
            "The examination will begin shortly.",
            "RE-DIRECT",
            "Q. Did you attend the EXAMINATION?",
        ],
    )
    def test_non_markers(self, line):
        assert not is_examination_marker(line)


class TestQuestionStart:
    """Question-start heuristics."""

    def test_q_dot(self):
        assert is_question_start("Q. Please state your full name for the record.")

    def test_q_space(self):
        assert is_question_start("  Q  Would you state your name for the record?")

    def test_by_attorney(self):
        assert is_question_start("BY MR. SMITH: Good morning, Mr. Doe.")

    def test_short_lines_rejected(self):
        assert not is_question_start("Q. Your name?")
        assert not is_question_start("Q. " + "x" * 17)  # exactly 20 characters

    def test_plain_prose_rejected(self):
        assert not is_question_start("Question about the weather today, please.")


class TestScan:
    """Line-by-line scan."""

    def test_marker_on_early_line(self):
        text = make_transcript({3: "EXAMINATION BY MR. SMITH:"})
        lines = build_line_table(text)

        boundary = scan_for_examination(lines)

        assert boundary.line == 3
        assert boundary.offset == offset_of_line(lines, 3)
        assert boundary.offset == sum(len(line) + 1 for line in lines[:3])
        assert boundary.preview_text == "EXAMINATION BY MR. SMITH:"

    def test_first_marker_wins(self):
        text = make_transcript({14: "DIRECT EXAMINATION", 30: "CROSS EXAMINATION"})
        assert scan_for_examination(build_line_table(text)).line == 14

    def test_marker_beats_earlier_question_pattern(self):
        text = make_transcript(
            {
                12: "Q. Please state your name for the record.",
                30: "EXAMINATION BY MS. JONES:",
            }
        )
        assert scan_for_examination(build_line_table(text)).line == 30

    def test_question_pattern_ignored_up_to_line_ten(self):
        text = make_transcript({5: "Q. Please state your name for the record."}, total_lines=30)
        assert not scan_for_examination(build_line_table(text)).found

    def test_question_pattern_on_line_ten_ignored(self):
        text = make_transcript({10: "Q. Please state your name for the record."}, total_lines=30)
        assert scan_for_examination(build_line_table(text)).line == -1

    def test_question_pattern_after_line_ten(self):
        text = make_transcript(
            {
                5: "Q. Please state your name for the record.",
                11: "Q. Where do you currently reside, sir?",
            },
            total_lines=30,
        )
        lines = build_line_table(text)

        boundary = scan_for_examination(lines)

        assert boundary.line == 11
        assert boundary.offset == offset_of_line(lines, 11)

    def test_short_question_line_skipped(self):
        text = make_transcript(
            {
                15: "Q. Name?",
                18: "BY MR. SMITH: Good morning, Mr. Doe.",
            }
        )
        assert scan_for_examination(build_line_table(text)).line == 18

    def test_nothing_found(self):
        boundary = scan_for_examination(build_line_table(make_transcript({})))
        assert (boundary.offset, boundary.line, boundary.preview_text) == (-1, -1, "")

    def test_empty_text(self):
        assert not scan_for_examination(build_line_table("")).found

    def test_preview_is_truncated(self):
        long_line = "EXAMINATION BY MR. SMITH " + "x" * 200
        text = make_transcript({2: long_line})
        assert scan_for_examination(build_line_table(text)).preview_text == long_line[:100]

    def test_custom_heuristic_limits(self):
        text = make_transcript({4: "Q. Where do you live?"}, total_lines=20)
        config = ScannerConfig(heuristic_min_line=2, heuristic_min_length=5)
        assert scan_for_examination(build_line_table(text), config).line == 4

    def test_scan_is_deterministic(self):
        lines = build_line_table(make_transcript({22: "Q. Please state your name for the record."}))
        assert scan_for_examination(lines) == scan_for_examination(lines)
