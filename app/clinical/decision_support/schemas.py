from pydantic import BaseModel

from app.clinical.cdt.schemas import ScoredMatch


class Treatment(BaseModel):
    name: str
    description: str
    cdt_codes: list[ScoredMatch]


class TreatmentRecommendation(BaseModel):
    treatments: list[Treatment]
    preventive_measures: list[str]


class TreatmentRequest(BaseModel):
    diagnosis: str
