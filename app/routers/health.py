from fastapi import APIRouter

from app.clinical.cdt.reference import get_reference_table

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness check; also reports how many CDT codes are loaded."""
    return {"status": "ok", "cdt_codes": len(get_reference_table())}
