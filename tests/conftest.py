# Ensures `import config` / `import core` work when running `pytest` from the repo root
# or a parent folder, without relying on PYTHONPATH being set by the shell.
import re
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import Config  # noqa: E402

A1_RANGE = re.compile(r"^([A-Z]+)(\d*)(?::([A-Z]+)(\d*))?$")


def col_index(letters):
    n = 0
    for ch in letters:
        n = n * 26 + ord(ch) - 64
    return n - 1


class FakeStore:
    """In-memory stand-in for SheetsStore with enough A1 semantics for the handler's ranges."""

    def __init__(self, sheets=None):
        self.sheets = {name: [list(r) for r in rows] for name, rows in (sheets or {}).items()}
        self.calls = []

    @staticmethod
    def _bounds(spec):
        m = A1_RANGE.match(spec)
        c1 = col_index(m.group(1))
        r1 = int(m.group(2)) if m.group(2) else 1
        if m.group(3):
            c2 = col_index(m.group(3))
            r2 = int(m.group(4)) if m.group(4) else None
        else:
            c2, r2 = c1, r1
        return r1, c1, r2, c2

    def read_range(self, sheet_name, range_spec):
        self.calls.append(("read", sheet_name, range_spec))
        grid = self.sheets.get(sheet_name, [])
        r1, c1, r2, c2 = self._bounds(range_spec)
        last = len(grid) if r2 is None else min(r2, len(grid))
        rows = []
        for r in range(r1, last + 1):
            row = [str(v) for v in grid[r - 1][c1:c2 + 1]]
            while row and row[-1] == "":
                row.pop()
            rows.append(row)
        while rows and not rows[-1]:
            rows.pop()
        return rows

    def _ensure(self, grid, rows, cols):
        while len(grid) < rows:
            grid.append([])
        for row in grid:
            while len(row) < cols:
                row.append("")

    def write_range(self, sheet_name, range_spec, values):
        self.calls.append(("write", sheet_name, range_spec, values))
        grid = self.sheets.setdefault(sheet_name, [])
        r1, c1, _, _ = self._bounds(range_spec)
        for dr, line in enumerate(values):
            self._ensure(grid, r1 + dr, c1 + len(line))
            for dc, value in enumerate(line):
                grid[r1 - 1 + dr][c1 + dc] = str(value)

    def append_rows(self, sheet_name, range_spec, values):
        self.calls.append(("append", sheet_name, range_spec, values))
        grid = self.sheets.setdefault(sheet_name, [])
        while grid and not any(str(v).strip() for v in grid[-1]):
            grid.pop()
        for line in values:
            grid.append([str(v) for v in line])

    def writes(self):
        return [c for c in self.calls if c[0] in ("write", "append")]


def data_row(sr, engineer="", gp="", work="", name="", year="", status="", *rest):
    return [str(sr), engineer, gp, work, name, year, status, *rest]


def data_sheet(rows, stamp="19-Oct-26 10:30 AM"):
    """Rows 1-4 are title, timestamp, blank and header; data starts at row 5."""
    return [
        ["GP WORKS"],
        [stamp] if stamp else [],
        [],
        ["SR", "ENGINEER", "GP", "TYPE", "NAME", "YEAR", "STATUS"],
        *rows,
    ]


def user_sheet(rows):
    return [["SR", "NAME", "POST", "PANCHAYATS", "DCODE", "USERID"], *rows]


SAMPLE_ROWS = [
    data_row(1, "A Kumar", "GP1", "Road", "Village road", "2023", "Complete"),
    data_row(2, "A Kumar", "GP2", "Pond", "Farm pond", "2024", "Ongoing"),
    data_row(3, "B Singh", "GP3", "Road", "Link road", "2024", "Complete", "", "", "note gp1"),
    data_row(4, "B Singh", "", "Well", "Community well", "2023", "Ongoing"),
    ["", "C Das", "GP9", "Road"],
    data_row(5, "C Das", "", "Pond", "Check dam", "2022", "Pending"),
    data_row(6, " A Kumar ", " GP1 ", "road", "Drain", "2024", "complete"),
]


@pytest.fixture
def config():
    return Config(spreadsheet_id="sheet-123", credentials_json='{"type": "service_account"}')


@pytest.fixture
def store():
    return FakeStore({
        Config.DATA_SHEET: data_sheet(SAMPLE_ROWS),
        Config.USER_SHEET: user_sheet([
            ["1", "Ravi Kumar", "JE", "GP1, GP3", "12", "ravje1201"],
            ["2", "Meena Devi", "AE", "GP2", "77", "meeae7702"],
        ]),
    })


@pytest.fixture
def empty_store():
    return FakeStore({
        Config.DATA_SHEET: data_sheet([], stamp=""),
        Config.USER_SHEET: user_sheet([]),
    })
