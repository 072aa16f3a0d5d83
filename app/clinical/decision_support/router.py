from fastapi import APIRouter

from app.clinical.decision_support.schemas import TreatmentRecommendation, TreatmentRequest
from app.clinical.decision_support.service import get_treatment_recommendations

router = APIRouter(prefix="/decision-support", tags=["Clinical: Decision support"])


@router.post("/treatments", response_model=TreatmentRecommendation)
def recommend_treatments(payload: TreatmentRequest):
    """Rule-based treatment options for a diagnosis, with suggested CDT codes."""
    return get_treatment_recommendations(payload.diagnosis)
