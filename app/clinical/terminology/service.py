from typing import Optional

from app.clinical.terminology.data import ABBREVIATIONS, TOOTH_NUMBERING_SYSTEMS
from app.core.errors import InvalidArgumentError


def get_tooth_name(system: str, tooth: str) -> Optional[str]:
    """Name of a tooth in the given numbering system ("universal" or "fdi")."""
    numbering = TOOTH_NUMBERING_SYSTEMS.get(str(system).strip().lower())
    if numbering is None:
        raise InvalidArgumentError(f"Unknown tooth numbering system: {system!r}")
    return numbering["mapping"].get(str(tooth).strip().upper())


def expand_abbreviation(abbreviation: str) -> Optional[str]:
    if not isinstance(abbreviation, str):
        raise InvalidArgumentError(f"abbreviation must be a string, got {type(abbreviation).__name__}")
    return ABBREVIATIONS.get(abbreviation.strip().upper())
