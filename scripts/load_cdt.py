"""Bulk-load a CDT code file (e.g. the annual ADA release export) into cdt_codes.

Usage:
    python scripts/load_cdt.py path/to/cdt.csv [--sep ";"] [--replace]

The file needs "code" and "description" columns; "category" is optional.
"""

import argparse
import logging
import sys
import os
from pathlib import Path

# Add project root to PYTHONPATH
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(BASE_DIR)

import pandas as pd

from sqlalchemy import delete, func, select

from app.clinical.cdt.models import CdtCode
from app.core.db import Base, SessionLocal, engine

logger = logging.getLogger("load_cdt")

CDT_CODE_PATTERN = r"^D\d{4}$"


def read_cdt_frame(csv_path: Path, sep: str = ",") -> pd.DataFrame:
    df = pd.read_csv(csv_path, sep=sep, dtype=str, keep_default_na=False)
    df.columns = [c.strip().lower() for c in df.columns]
    missing = {"code", "description"} - set(df.columns)
    if missing:
        raise ValueError(f"{csv_path}: missing columns {sorted(missing)}")
    if "category" not in df.columns:
        df["category"] = ""

    df["code"] = df["code"].str.strip().str.upper()
    df["description"] = df["description"].str.strip()
    df["category"] = df["category"].str.strip()

    valid = df["code"].str.match(CDT_CODE_PATTERN) & (df["description"] != "")
    skipped = int((~valid).sum())
    if skipped:
        logger.warning("Skipping %d rows without a valid code or description", skipped)
    return df[valid].drop_duplicates(subset="code", keep="last")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Load CDT codes into the database")
    parser.add_argument("csv_path", type=Path)
    parser.add_argument("--sep", default=",")
    parser.add_argument("--replace", action="store_true", help="delete existing codes before loading")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        existing_count = db.execute(select(func.count()).select_from(CdtCode)).scalar_one()
        if existing_count > 0 and not args.replace:
            logger.info("cdt_codes already has %d rows. Use --replace to reload.", existing_count)
            return

        logger.info("Loading file: %s", args.csv_path.resolve())
        df = read_cdt_frame(args.csv_path, sep=args.sep)

        if args.replace:
            db.execute(delete(CdtCode))

        for _, row in df.iterrows():
            db.merge(CdtCode(code=row["code"], description=row["description"], category=row["category"] or None))

        db.commit()
        logger.info("Loaded %d CDT codes", len(df))
    except Exception as exc:
        db.rollback()
        logger.error("Error loading CDT codes: %s", exc)
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
