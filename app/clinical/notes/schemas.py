from pydantic import BaseModel, Field

from app.clinical.cdt.schemas import ScoredMatch


class NoteCode(BaseModel):
    code: str
    description: str


class StructuredNote(BaseModel):
    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""
    cdt_codes: list[NoteCode] = Field(default_factory=list)


class DifferentialDiagnosis(BaseModel):
    name: str = ""
    likelihood: str = ""
    supporting_evidence: str = ""
    diagnostic_tests: str = ""
    treatment_considerations: str = ""


class NoteParseRequest(BaseModel):
    text: str
    suggest_codes: bool = False


class NoteParseResponse(StructuredNote):
    suggested_codes: list[ScoredMatch] | None = None


class DifferentialsRequest(BaseModel):
    text: str
