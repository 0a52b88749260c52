"""Row filtering for the data view: panchayat access gate, field filters, free-text search."""

from typing import Dict, List, Sequence

from .logger import log_msg
from .records import cell, pad_rows, present_rows
from .users import allowed_panchayats


def clean_filter(raw) -> Dict[str, str]:
    """Trimmed, non-empty filter fields only."""
    if not isinstance(raw, dict):
        return {}
    cleaned = {}
    for key, value in raw.items():
        text = str(value if value is not None else "").strip()
        if text:
            cleaned[key] = text
    return cleaned


def row_matches(row: Sequence[str], filters: Dict[str, str], allowed: Sequence[str],
                config) -> bool:
    if allowed and cell(row, config.COL_GP).lower() not in allowed:
        return False

    for field, column in config.FILTER_COLUMNS.items():
        wanted = filters.get(field)
        if wanted and cell(row, column).lower() != wanted.lower():
            return False

    search = filters.get("search")
    if search:
        haystack = " ".join(str(c) for c in row).lower()
        if search.lower() not in haystack:
            return False

    return True


def filter_rows(rows, filters, allowed, config) -> List[List[str]]:
    return [list(row) for row in rows if row_matches(row, filters, allowed, config)]


def get_filtered_data(store, config, payload):
    """
    PURPOSE: Return the data rows visible to the caller under the filter.

    LOGIC:
      - Present rows only
      - payload.userid restricts rows to that user's panchayats (unknown
        user: no restriction)
      - Each non-empty filter field must equal its column (trimmed,
        case-insensitive); search is a substring of the joined row
      - Survivors padded to a rectangular width

    RETURNS:
      dict: {rows: [[str, ...], ...]}
    """
    payload = payload or {}
    filters = clean_filter(payload.get("filter"))

    rows = present_rows(store.read_range(config.DATA_SHEET, config.DATA_RANGE))
    allowed = allowed_panchayats(store, config, payload.get("userid"))

    kept = filter_rows(rows, filters, allowed, config)
    log_msg(f"[OK] Filtered {len(kept)}/{len(rows)} rows")
    return {"rows": pad_rows(kept)}
