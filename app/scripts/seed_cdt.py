import logging
import os

from sqlalchemy import select

from app.clinical.cdt.models import CdtCode
from app.clinical.cdt.reference import ReferenceTable
from app.core.config import settings
from app.core.db import Base, SessionLocal

logger = logging.getLogger(__name__)


def seed_cdt(csv_path: str = settings.CDT_CSV_PATH, session_factory=SessionLocal) -> tuple[int, int]:
    """Upsert the bundled CDT codes into the cdt_codes table.

    Returns (inserted, existed). Existing rows get their description and category refreshed.
    """
    table = ReferenceTable.from_csv(csv_path)
    inserted = 0
    existed = 0

    db = session_factory()
    try:
        Base.metadata.create_all(bind=db.get_bind())
        for entry in table:
            existing = db.execute(select(CdtCode).where(CdtCode.code == entry.code)).scalar_one_or_none()
            if existing:
                existed += 1
                if existing.description != entry.description:
                    existing.description = entry.description
                if existing.category != entry.category:
                    existing.category = entry.category
                continue

            db.add(CdtCode(code=entry.code, description=entry.description, category=entry.category))
            inserted += 1

        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    return inserted, existed


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    csv_path = os.getenv("CDT_CSV_PATH", settings.CDT_CSV_PATH)
    inserted, existed = seed_cdt(csv_path=csv_path)
    logger.info("CDT seed complete. inserted=%d existed=%d", inserted, existed)


if __name__ == "__main__":
    main()
