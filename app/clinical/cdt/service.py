"""CDT code lookup.

Scores every reference entry against the keywords of a free-text description
(typically the assessment or plan of a generated note) and returns the entries
whose descriptions contain the most keywords. The scan is linear over the table,
which is small enough that no index is kept.
"""

from __future__ import annotations

from typing import List, Optional

from app.clinical.cdt.reference import ReferenceTable, get_reference_table
from app.clinical.cdt.schemas import CodeEntry, ScoredMatch
from app.core.errors import InvalidArgumentError

# Keywords this short ("a", "of", "the", "and") are ignored when scoring.
MIN_KEYWORD_LENGTH = 4


def _keywords(description: str) -> List[str]:
    return [k for k in description.lower().split() if len(k) >= MIN_KEYWORD_LENGTH]


def lookup_cdt_codes(
    description: str,
    table: Optional[ReferenceTable] = None,
    limit: Optional[int] = None,
) -> List[ScoredMatch]:
    """Return reference entries matching `description`, best first.

    Each keyword longer than three characters adds one point to every entry whose
    description contains it (case-insensitive substring). Repeated keywords count
    again. Entries scoring zero are dropped; equal scores keep table order.
    """
    if not isinstance(description, str):
        raise InvalidArgumentError(f"description must be a string, got {type(description).__name__}")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
        raise InvalidArgumentError(f"limit must be a positive integer, got {limit!r}")

    keywords = _keywords(description)
    if not keywords:
        return []

    if table is None:
        table = get_reference_table()

    matches: List[ScoredMatch] = []
    for entry in table:
        lower_desc = entry.description.lower()
        score = sum(1 for k in keywords if k in lower_desc)
        if score > 0:
            matches.append(ScoredMatch(code=entry.code, description=entry.description, score=score))

    # sorted() is stable, so ties stay in table order
    matches = sorted(matches, key=lambda m: m.score, reverse=True)
    if limit is not None:
        matches = matches[:limit]
    return matches


def get_cdt_code(code: str, table: Optional[ReferenceTable] = None) -> Optional[CodeEntry]:
    """Get a reference entry by its exact code (case-insensitive)."""
    if not isinstance(code, str):
        raise InvalidArgumentError(f"code must be a string, got {type(code).__name__}")
    c = code.strip()
    if not c:
        return None
    if table is None:
        table = get_reference_table()
    return table.get(c)


def list_cdt_codes(category: Optional[str] = None, table: Optional[ReferenceTable] = None) -> List[CodeEntry]:
    if category is not None and not isinstance(category, str):
        raise InvalidArgumentError(f"category must be a string, got {type(category).__name__}")
    if table is None:
        table = get_reference_table()
    if category is None or not category.strip():
        return list(table)
    return table.by_category(category)
