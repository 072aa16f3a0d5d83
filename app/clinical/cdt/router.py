"""FastAPI router for CDT codes.

Search results are billing-code suggestions, not validated claims; the
clinician confirms the final code on the note.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query

from app.clinical.cdt.service import get_cdt_code, list_cdt_codes, lookup_cdt_codes
from app.core.config import settings

router = APIRouter(prefix="/cdt", tags=["Clinical: CDT"])


@router.get("/search")
def search(
    q: str = Query(default=""),
    limit: int = Query(default=settings.CDT_SEARCH_LIMIT, ge=1, le=100),
) -> List[Dict[str, Any]]:
    results = lookup_cdt_codes(q, limit=limit)
    return [{"code": r.code, "description": r.description, "score": r.score} for r in results]


@router.get("")
def list_codes(category: Optional[str] = Query(default=None)) -> List[Dict[str, Any]]:
    return [{"code": e.code, "description": e.description, "category": e.category} for e in list_cdt_codes(category)]


@router.get("/{code}")
def get_by_code(code: str) -> Dict[str, Any]:
    item = get_cdt_code(code)
    if not item:
        raise HTTPException(status_code=404, detail="CDT code not found")
    return {"code": item.code, "description": item.description, "category": item.category}
