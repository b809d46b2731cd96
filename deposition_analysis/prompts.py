# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Prompt templates for the three extraction calls."""

from __future__ import annotations


SYSTEM_PROMPT = (
    "You are a legal document parser. Extract information accurately and return only valid JSON."
)


def boundary_prompt(transcript_prefix: str) -> str:
    """Prompt asking for the examination start and the appearance-section facts."""

    return "\n".join(
        [
            "Analyze the beginning of this legal deposition transcript. Return ONLY a valid JSON object "
            "with no additional text or explanation.",
            "",
            "Tasks:",
            "1. Find where the examination (question-and-answer testimony) begins. This is right after "
            "the appearances and preliminary statements, usually at a heading such as \"EXAMINATION\", "
            "\"EXAMINATION BY MR. SMITH:\", \"DIRECT EXAMINATION\" or \"CROSS EXAMINATION\", or at the "
            "first question line (\"Q.\"). Ignore such words inside an index or table of contents if the "
            "testimony clearly starts later.",
            "   - examinationStartIndex: zero-based character position in the text below where the "
            "examination starts, or -1 if unknown.",
            "   - examinationStartLine: zero-based line number (counting lines separated by newline "
            "characters) of that position, or -1 if unknown.",
            "   - examinationStartText: the first words of the examination start line.",
            "2. depositionDate: the date of the deposition in the format found, or an empty string.",
            "3. courtReporter: name of the certified court reporter / stenographer, or an empty string.",
            "4. attorneys: every attorney listed in the appearance section with their role as stated "
            "(e.g. \"Attorney for Plaintiff\"). Use an empty string if the role is not stated.",
            "5. deponent: name of the person being deposed, or an empty string.",
            "6. appearanceSection: the text of the appearance section, or an empty string.",
            "",
            "Return the result in this exact JSON format:",
            "{",
            '  "examinationStartIndex": 1234,',
            '  "examinationStartLine": 42,',
            '  "examinationStartText": "EXAMINATION BY MR. SMITH:",',
            '  "depositionDate": "date string or empty string",',
            '  "courtReporter": "name or empty string",',
            '  "attorneys": [{"name": "Attorney Name, Esq.", "role": "Attorney for Plaintiff"}],',
            '  "deponent": "name or empty string",',
            '  "appearanceSection": "text or empty string"',
            "}",
            "",
            "Transcript text:",
            transcript_prefix,
        ]
    )


def role_prompt(examination_window: str) -> str:
    """Prompt asking who questions and who defends in the examination."""

    return "\n".join(
        [
            "This is the beginning of the examination section of a legal deposition transcript. "
            "Identify the roles of the attorneys. Return ONLY a valid JSON object with no additional "
            "text or explanation.",
            "",
            "Rules:",
            "- The questioning attorney (noticing/taking party) asks the questions. Look for the "
            "attorney who asks the first or most questions, e.g. lines starting with \"Q.\" after "
            "\"BY MR. SMITH:\", or a name followed by a question.",
            "- The defending attorney represents the deponent and raises objections. Look for "
            "\"OBJECTION\", \"I object\" or \"I'll object\" and who says it.",
            "- examinationAttorneys: every attorney speaking in this section with role "
            "\"Questioning\", \"Defending\" or \"Unknown\".",
            "- depositionDate: the deposition date if it is mentioned here, else an empty string.",
            "",
            "Return the result in this exact JSON format:",
            "{",
            '  "questioningAttorney": "name or empty string",',
            '  "defendingAttorney": "name or empty string",',
            '  "examinationAttorneys": [{"name": "Attorney Name", "role": "Questioning"}],',
            '  "depositionDate": "date string or empty string"',
            "}",
            "",
            "Examination text:",
            examination_window,
        ]
    )


def caption_prompt(caption_text: str) -> str:
    """Prompt for the caption section (court, case names, parties, attorneys, date)."""

    return "\n".join(
        [
            "Extract the following information from this legal deposition transcript caption section. "
            "Return ONLY a valid JSON object with no additional text or explanation.",
            "",
            "Requirements:",
            "1. Jurisdiction: the full court jurisdiction, which may span several lines. State courts "
            "mention a county (e.g. \"Superior Court of the State of California, County of "
            "Sacramento\"), federal courts a district (e.g. \"United States District Court for the "
            "Northern District of California\").",
            "2. Case Name: in the form \"Party v. Party\" or \"Party vs. Party\". A case name MUST "
            "contain \"v.\" or \"vs\" and must not include jurisdiction text. Return all case names as "
            "an array.",
            "3. Participants: the parties of the case (plaintiffs and defendants) named in the caption, "
            "as an array of names.",
            "4. Attorneys: from the \"Appearances\" section (or \"Appearing\", \"Attorneys for\", "
            "\"Counsel for\"). Attorneys are usually marked with \"Esq.\" or \"Esquire\". Return the "
            "full name (including \"Esq.\" if present) and the affiliation (the party represented) or "
            "an empty string if unclear.",
            "5. Deposition Date: look for \"Deposition taken on\", \"Taken on\", \"Date:\" and similar. "
            "Return the date in the format found.",
            "",
            "Return the result in this exact JSON format:",
            "{",
            '  "jurisdiction": "full jurisdiction text or empty string",',
            '  "caseNames": ["case name 1", "case name 2"],',
            '  "participants": ["participant name 1", "participant name 2"],',
            '  "attorneys": [{"name": "Attorney Name, Esq.", "affiliation": "Plaintiff"}],',
            '  "depositionDate": "date string or empty string"',
            "}",
            "",
            "Caption text:",
            caption_text,
        ]
    )
