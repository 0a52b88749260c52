"""Row helpers shared by the dropdown, filter and user operations."""

from typing import Iterable, List, Optional, Sequence


def cell(row: Sequence[str], index: int) -> str:
    """Trimmed value of ``row[index]``; missing cells read as ``""``."""
    if index < len(row) and row[index] is not None:
        return str(row[index]).strip()
    return ""


def is_present(row: Sequence[str]) -> bool:
    return bool(cell(row, 0))


def present_rows(rows: Iterable[Sequence[str]]) -> List[List[str]]:
    """Keep only rows whose first column is non-empty after trimming."""
    return [list(row) for row in rows if is_present(row)]


def pad_rows(rows: Sequence[Sequence[str]]) -> List[List[str]]:
    """Pad every row with ``""`` to the widest row's width (at least 1)."""
    width = max([len(row) for row in rows] + [1])
    return [list(row) + [""] * (width - len(row)) for row in rows]


def unique(values: Iterable[str]) -> List[str]:
    """Distinct non-empty values, exact match, first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


def split_panchayats(value: Optional[str]) -> List[str]:
    """Split a stored comma-joined panchayat string, trimmed, blanks dropped."""
    if not value:
        return []
    return [part.strip() for part in str(value).split(",") if part.strip()]


def join_panchayats(values: Iterable[str]) -> str:
    return ", ".join(values)


def same_text(a, b) -> bool:
    """Case-insensitive, trimmed comparison."""
    return str(a or "").strip().lower() == str(b or "").strip().lower()
