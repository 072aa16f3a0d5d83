"""Rule-based treatment recommendations.

Rules are checked in order and the first whose keywords appear in the diagnosis
wins. Each treatment names the lookup phrase used to pull its CDT codes and how
many of the top matches to keep.
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Tuple

from app.clinical.cdt.reference import ReferenceTable
from app.clinical.cdt.service import lookup_cdt_codes
from app.clinical.decision_support.schemas import Treatment, TreatmentRecommendation
from app.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class TreatmentRule(NamedTuple):
    name: str
    description: str
    lookup: str
    max_codes: int


class DiagnosisRule(NamedTuple):
    keywords: Tuple[str, ...]
    treatments: Tuple[TreatmentRule, ...]
    preventive_measures: Tuple[str, ...]


RULES: Tuple[DiagnosisRule, ...] = (
    DiagnosisRule(
        keywords=("caries", "cavity"),
        treatments=(
            TreatmentRule(
                "Composite restoration",
                "Tooth-colored filling to restore the affected tooth",
                "resin-based composite",
                3,
            ),
            TreatmentRule("Amalgam restoration", "Silver filling to restore the affected tooth", "amalgam", 3),
        ),
        preventive_measures=(
            "Improved oral hygiene instruction",
            "Increased fluoride exposure",
            "Dietary counseling to reduce sugar intake",
            "Regular dental check-ups",
        ),
    ),
    DiagnosisRule(
        keywords=("pulpitis", "pulp"),
        treatments=(
            TreatmentRule(
                "Root canal treatment",
                "Removal of infected pulp tissue and sealing of the root canal system",
                "endodontic therapy",
                3,
            ),
        ),
        preventive_measures=("Follow-up with permanent restoration (crown)",),
    ),
    DiagnosisRule(
        keywords=("gingivitis",),
        treatments=(
            TreatmentRule("Professional dental cleaning", "Removal of plaque and calculus", "prophylaxis", 2),
        ),
        preventive_measures=(
            "Improved oral hygiene instruction",
            "Regular use of antimicrobial mouthwash",
            "Regular dental check-ups",
        ),
    ),
    DiagnosisRule(
        keywords=("periodontitis",),
        treatments=(
            TreatmentRule("Scaling and root planing", "Deep cleaning below the gumline", "scaling and root planing", 2),
            TreatmentRule("Periodontal maintenance", "Regular maintenance cleaning", "periodontal maintenance", 1),
        ),
        preventive_measures=(
            "Improved oral hygiene instruction",
            "Regular periodontal maintenance visits",
            "Smoking cessation if applicable",
        ),
    ),
)

FALLBACK_RULE = DiagnosisRule(
    keywords=(),
    treatments=(
        TreatmentRule(
            "Further evaluation needed",
            "Additional diagnostic tests or specialist consultation may be required",
            "evaluation",
            3,
        ),
    ),
    preventive_measures=("Maintain good oral hygiene", "Regular dental check-ups"),
)


def match_rule(diagnosis: str) -> DiagnosisRule:
    lowered = diagnosis.lower()
    for rule in RULES:
        if any(k in lowered for k in rule.keywords):
            return rule
    return FALLBACK_RULE


def get_treatment_recommendations(
    diagnosis: str,
    table: Optional[ReferenceTable] = None,
) -> TreatmentRecommendation:
    if not isinstance(diagnosis, str):
        raise InvalidArgumentError(f"diagnosis must be a string, got {type(diagnosis).__name__}")

    rule = match_rule(diagnosis)
    if rule is FALLBACK_RULE:
        logger.info("No treatment rule for diagnosis %r; recommending further evaluation", diagnosis)

    treatments: List[Treatment] = [
        Treatment(
            name=t.name,
            description=t.description,
            cdt_codes=lookup_cdt_codes(t.lookup, table=table, limit=t.max_codes),
        )
        for t in rule.treatments
    ]
    return TreatmentRecommendation(treatments=treatments, preventive_measures=list(rule.preventive_measures))
