"""Tests for the line table and offset bookkeeping."""

from deposition_analysis.lines import (
    build_line_table,
    line_of_offset,
    offset_of_line,
    preview_of_line,
)


class TestLineTable:
    """Line splitting and offset lookup."""

    def test_split_on_newline(self):
        assert build_line_table("a\nbb\n\nccc") == ["a", "bb", "", "ccc"]

    def test_trailing_newline_yields_empty_last_line(self):
        assert build_line_table("a\n") == ["a", ""]

    def test_offset_of_first_line_is_zero(self):
        assert offset_of_line(["abc", "def"], 0) == 0

    def test_offset_sums_lengths_plus_separator(self):
        lines = ["abc", "", "de", "fghi"]
        assert offset_of_line(lines, 3) == 3 + 1 + 0 + 1 + 2 + 1

    def test_offset_points_at_line_start_in_text(self):
        text = "CAPTION\nAPPEARANCES\n  Mr. Smith\nEXAMINATION BY MR. SMITH:\nQ. Hello"
        lines = build_line_table(text)
        offset = offset_of_line(lines, 3)
        assert text[offset:].startswith("EXAMINATION BY MR. SMITH:")

    def test_line_of_offset_inverts_offset_of_line(self):
        lines = build_line_table("one\ntwo\n\nfour\nfive")
        for idx in range(len(lines)):
            assert line_of_offset(lines, offset_of_line(lines, idx)) == idx

    def test_line_of_offset_inside_and_past_end(self):
        lines = build_line_table("one\ntwo")
        assert line_of_offset(lines, 2) == 0
        assert line_of_offset(lines, 3) == 0  # the separator ends line 0
        assert line_of_offset(lines, 5) == 1
        assert line_of_offset(lines, 999) == 1

    def test_preview_truncates_and_handles_out_of_range(self):
        lines = ["x" * 150, "short"]
        assert preview_of_line(lines, 0) == "x" * 100
        assert preview_of_line(lines, 1, 3) == "sho"
        assert preview_of_line(lines, 2) == ""
        assert preview_of_line(lines, -1) == ""

    def test_crlf_is_not_normalized(self):
        # Offsets follow the line table, which keeps the carriage returns.
        text = "ab\r\ncd\r\nEXAMINATION"
        lines = build_line_table(text)
        assert lines == ["ab\r", "cd\r", "EXAMINATION"]
        assert text[offset_of_line(lines, 2):] == "EXAMINATION"
