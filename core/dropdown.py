"""
================================================================================
DROPDOWN.PY - FILTER VALUES FOR THE UI
================================================================================
PURPOSE: Build the distinct values that populate the filter dropdowns, plus
         the engineer -> GP mapping and the sheet's "last updated" stamp.
================================================================================
"""

from .logger import log_msg
from .records import cell, present_rows, unique


def get_dropdown_data(store, config):
    """
    PURPOSE: Aggregate distinct engineers, work types, statuses, years and GPs.

    LOGIC:
      - Read the timestamp cell, then the data range (two sequential reads)
      - Keep present rows only
      - Distinct non-empty trimmed values per column (exact-match dedup)
      - Map each engineer to the distinct non-empty GPs on their rows

    RETURNS:
      dict: engineers, works, status, years, allPanchayats,
            gpsByEngineer, updateTime
    """
    stamp = store.read_range(config.DATA_SHEET, config.UPDATE_TIME_CELL)
    update_time = cell(stamp[0], 0) if stamp else ""

    rows = present_rows(store.read_range(config.DATA_SHEET, config.DATA_RANGE))

    gps_by_engineer = {}
    for row in rows:
        engineer = cell(row, config.COL_ENGINEER)
        if not engineer:
            continue
        gps = gps_by_engineer.setdefault(engineer, [])
        gp = cell(row, config.COL_GP)
        if gp and gp not in gps:
            gps.append(gp)

    data = {
        "engineers": unique(cell(row, config.COL_ENGINEER) for row in rows),
        "works": unique(cell(row, config.COL_WORK) for row in rows),
        "status": unique(cell(row, config.COL_STATUS) for row in rows),
        "years": unique(cell(row, config.COL_YEAR) for row in rows),
        "allPanchayats": unique(cell(row, config.COL_GP) for row in rows),
        "gpsByEngineer": gps_by_engineer,
        "updateTime": update_time,
    }

    log_msg(f"[OK] Dropdown data from {len(rows)} rows "
            f"({len(data['engineers'])} engineers, {len(data['allPanchayats'])} GPs)")
    return data
