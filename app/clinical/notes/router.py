"""FastAPI router for note post-processing.

The LLM call itself happens upstream; this router only receives its text.
"""

from typing import List

from fastapi import APIRouter

from app.clinical.notes.parser import parse_differential_diagnoses, parse_note_text, suggest_codes_for_note
from app.clinical.notes.schemas import (
    DifferentialDiagnosis,
    DifferentialsRequest,
    NoteParseRequest,
    NoteParseResponse,
)
from app.core.config import settings

router = APIRouter(prefix="/notes", tags=["Clinical: Notes"])


@router.post("/parse", response_model=NoteParseResponse)
def parse_note(payload: NoteParseRequest):
    note = parse_note_text(payload.text)
    response = NoteParseResponse(**note.model_dump())
    if payload.suggest_codes:
        response.suggested_codes = suggest_codes_for_note(note, limit=settings.CDT_SUGGESTION_LIMIT)
    return response


@router.post("/differentials", response_model=List[DifferentialDiagnosis])
def parse_differentials(payload: DifferentialsRequest):
    return parse_differential_diagnoses(payload.text)
