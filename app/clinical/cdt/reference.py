"""CDT reference table.

The table is read once per process and never mutated afterwards. Callers either
pass a `ReferenceTable` explicitly (tests, scripts) or go through
`get_reference_table()`, which builds the configured source on first use.
"""

from __future__ import annotations

import csv
import logging
from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.clinical.cdt.models import CdtCode
from app.clinical.cdt.schemas import CodeEntry
from app.core.config import settings
from app.core.db import SessionLocal
from app.core.errors import ReferenceDataError

logger = logging.getLogger(__name__)


class ReferenceTable:
    """Ordered, read-only collection of CDT entries indexed by code."""

    def __init__(self, entries: Iterable[CodeEntry]):
        ordered: List[CodeEntry] = []
        index: Dict[str, CodeEntry] = {}
        for entry in entries:
            code = entry.code.strip().upper()
            if not code or not entry.description.strip():
                raise ReferenceDataError(f"CDT entry with empty code or description: {entry!r}")
            if code in index:
                raise ReferenceDataError(f"Duplicate CDT code in reference table: {code}")
            index[code] = entry
            ordered.append(entry)
        self._entries: Tuple[CodeEntry, ...] = tuple(ordered)
        self._index = index

    def __iter__(self) -> Iterator[CodeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._index

    @property
    def entries(self) -> Tuple[CodeEntry, ...]:
        return self._entries

    def get(self, code: str) -> Optional[CodeEntry]:
        return self._index.get(code.strip().upper())

    def by_category(self, category: str) -> List[CodeEntry]:
        wanted = category.strip().lower()
        return [e for e in self._entries if (e.category or "").lower() == wanted]

    def categories(self) -> List[str]:
        seen: Dict[str, None] = {}
        for entry in self._entries:
            if entry.category:
                seen.setdefault(entry.category, None)
        return list(seen)

    @classmethod
    def from_mapping(cls, mapping: Dict[str, str], category: Optional[str] = None) -> "ReferenceTable":
        """Build a table from a plain `code -> description` mapping."""
        return cls(CodeEntry(code=code, description=desc, category=category) for code, desc in mapping.items())

    @classmethod
    def from_csv(cls, csv_path: str) -> "ReferenceTable":
        try:
            with open(csv_path, "r", encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                if not reader.fieldnames or not {"code", "description"} <= set(reader.fieldnames):
                    raise ReferenceDataError(f"{csv_path}: expected 'code' and 'description' columns")
                entries = [
                    CodeEntry(
                        code=(row.get("code") or "").strip(),
                        description=(row.get("description") or "").strip(),
                        category=(row.get("category") or "").strip() or None,
                    )
                    for row in reader
                ]
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise ReferenceDataError(f"Cannot read CDT reference file {csv_path}: {exc}") from exc
        return cls(entries)

    @classmethod
    def from_session(cls, db: Session) -> "ReferenceTable":
        try:
            rows = db.execute(select(CdtCode).order_by(CdtCode.code.asc())).scalars().all()
        except SQLAlchemyError as exc:
            raise ReferenceDataError(f"Cannot read cdt_codes table: {exc}") from exc
        if not rows:
            raise ReferenceDataError("cdt_codes table is empty; run `python -m app.scripts.seed_cdt`")
        return cls(CodeEntry.model_validate(row) for row in rows)


def load_reference_table(source: Optional[str] = None, csv_path: Optional[str] = None) -> ReferenceTable:
    """Load the reference table from the configured source."""
    source = (source or settings.CDT_SOURCE).strip().lower()
    if source == "csv":
        path = csv_path or settings.CDT_CSV_PATH
        table = ReferenceTable.from_csv(path)
        logger.info("Loaded %d CDT codes from %s", len(table), path)
        return table
    if source == "database":
        with SessionLocal() as db:
            table = ReferenceTable.from_session(db)
        logger.info("Loaded %d CDT codes from database", len(table))
        return table
    raise ReferenceDataError(f"Unknown CDT_SOURCE: {source!r} (expected 'csv' or 'database')")


@lru_cache(maxsize=None)
def get_reference_table() -> ReferenceTable:
    """Process-wide reference table, built on first call."""
    return load_reference_table()
