"""Parsers for LLM-drafted clinical text.

The note drafting step asks the model for a SOAP note followed by a
"CDT Codes:" section, and for differential diagnoses as a numbered list. These
helpers turn that free text into structured records. They never fail on
unexpected layouts: missing sections come back empty.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from app.clinical.cdt.reference import ReferenceTable
from app.clinical.cdt.schemas import ScoredMatch
from app.clinical.cdt.service import lookup_cdt_codes
from app.clinical.notes.schemas import DifferentialDiagnosis, NoteCode, StructuredNote
from app.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.DOTALL

# Each section runs until the header of the next one, or to the end of the text.
_SECTION_PATTERNS = {
    "subjective": re.compile(r"Subjective:(.*?)(?=Objective:|\Z)", _FLAGS),
    "objective": re.compile(r"Objective:(.*?)(?=Assessment:|\Z)", _FLAGS),
    "assessment": re.compile(r"Assessment:(.*?)(?=Plan:|\Z)", _FLAGS),
    "plan": re.compile(r"Plan:(.*?)(?=CDT Codes:|\Z)", _FLAGS),
}
_CDT_SECTION = re.compile(r"CDT Codes:(.*)\Z", _FLAGS)
_CDT_CODE = re.compile(r"D\d{4}")
_LIST_MARKER = re.compile(r"^\s*(?:\d+[.)]|[-*•])\s*")
_SEPARATORS = " \t:-–—"

_DIAGNOSIS_SPLIT = re.compile(r"\d+\.\s+")
_LIKELIHOOD = re.compile(r"\((High|Moderate|Low)\)", re.IGNORECASE)
_DIAGNOSIS_FIELDS = (
    (re.compile(r"supporting evidence", re.IGNORECASE), "supporting_evidence"),
    (re.compile(r"diagnostic tests", re.IGNORECASE), "diagnostic_tests"),
    (re.compile(r"treatment considerations", re.IGNORECASE), "treatment_considerations"),
)


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _parse_code_line(line: str) -> Optional[NoteCode]:
    match = _CDT_CODE.search(line)
    if not match:
        return None
    rest = line[: match.start()] + line[match.end():]
    rest = _LIST_MARKER.sub("", rest)
    rest = rest.replace("()", "").strip(_SEPARATORS)
    return NoteCode(code=match.group(0), description=rest)


def parse_note_text(note_text: str) -> StructuredNote:
    """Split a drafted SOAP note into its sections and listed CDT codes."""
    text = _require_text(note_text, "note_text")

    sections = {}
    for name, pattern in _SECTION_PATTERNS.items():
        match = pattern.search(text)
        sections[name] = match.group(1).strip() if match else ""

    codes: List[NoteCode] = []
    cdt_match = _CDT_SECTION.search(text)
    if cdt_match:
        for line in cdt_match.group(1).strip().splitlines():
            code = _parse_code_line(line)
            if code is not None:
                codes.append(code)

    return StructuredNote(cdt_codes=codes, **sections)


def parse_differential_diagnoses(diagnoses_text: str) -> List[DifferentialDiagnosis]:
    """Parse a numbered list of differential diagnoses.

    Expected layout per item::

        1. Irreversible pulpitis (High)
           Supporting evidence: lingering pain to cold
           Diagnostic tests: pulp vitality, periapical radiograph
           Treatment considerations: root canal therapy
    """
    text = _require_text(diagnoses_text, "diagnoses_text")

    blocks = _DIAGNOSIS_SPLIT.split(text)
    if blocks and not blocks[0].strip():
        blocks = blocks[1:]

    diagnoses: List[DifferentialDiagnosis] = []
    for block in blocks:
        if not block.strip():
            continue

        lines = block.split("\n")
        head = lines[0]
        fields = {"name": _LIKELIHOOD.sub("", head).strip(), "likelihood": ""}
        likelihood = _LIKELIHOOD.search(head)
        if likelihood:
            fields["likelihood"] = likelihood.group(1).capitalize()

        current: Optional[str] = None
        collected = {key: [] for _, key in _DIAGNOSIS_FIELDS}
        for raw in lines[1:]:
            line = raw.strip()
            header = next((key for pattern, key in _DIAGNOSIS_FIELDS if pattern.search(line)), None)
            if header:
                current = header
                _, _, inline = line.partition(":")
                if inline.strip():
                    collected[current].append(inline.strip())
            elif line and current:
                collected[current].append(line)

        for key, parts in collected.items():
            fields[key] = " ".join(parts).strip()
        diagnoses.append(DifferentialDiagnosis(**fields))

    logger.debug("Parsed %d differential diagnoses", len(diagnoses))
    return diagnoses


def suggest_codes_for_note(
    note: StructuredNote,
    limit: int,
    table: Optional[ReferenceTable] = None,
) -> List[ScoredMatch]:
    """Billing-code suggestions for a parsed note, from its assessment and plan."""
    text = " ".join(part for part in (note.assessment, note.plan) if part)
    if not text.strip():
        return []
    return lookup_cdt_codes(text, table=table, limit=limit)
