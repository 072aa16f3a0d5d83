from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from app.clinical.terminology.service import expand_abbreviation, get_tooth_name

router = APIRouter(prefix="/terminology", tags=["Clinical: Terminology"])


@router.get("/teeth/{system}/{tooth}")
def tooth_name(system: str, tooth: str) -> Dict[str, Any]:
    name = get_tooth_name(system, tooth)
    if not name:
        raise HTTPException(status_code=404, detail="Tooth not found")
    return {"system": system.lower(), "tooth": tooth.upper(), "name": name}


@router.get("/abbreviations/{abbr}")
def abbreviation(abbr: str) -> Dict[str, Any]:
    meaning = expand_abbreviation(abbr)
    if not meaning:
        raise HTTPException(status_code=404, detail="Abbreviation not found")
    return {"abbreviation": abbr.upper(), "meaning": meaning}
