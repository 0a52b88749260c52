"""
================================================================================
USERS.PY - USER REGISTRY
================================================================================
PURPOSE: Look up, create and update entries of the user registry sheet.

REGISTRY ROW (columns A-F):
  serial | name | post | panchayats (comma-joined) | dcode | userid

NOTES:
  - Names are unique under trimmed, case-insensitive comparison
  - Panchayat grants only ever grow on update
  - userid is derived once at creation: name[:3] + post[:2] + dcode[-2:] +
    serial[-2:], lowercased. It is NOT unique by construction; two users can
    share one and lookups take the first match in sheet order.
================================================================================
"""

import math
from typing import List, Optional, Sequence

from .errors import MissingFieldsError, NoInputError
from .logger import log_msg, print_info
from .records import cell, join_panchayats, same_text, split_panchayats, unique


def read_users(store, config) -> List[List[str]]:
    """All registry rows below the header, as stored (sparse)."""
    return store.read_range(config.USER_SHEET, config.USER_RANGE)


def find_user(users: Sequence[Sequence[str]], text: str, config) -> Optional[int]:
    """Index of the first entry whose name or userid matches ``text``."""
    for idx, user in enumerate(users):
        if (same_text(cell(user, config.USER_COL_NAME), text)
                or same_text(cell(user, config.USER_COL_USERID), text)):
            return idx
    return None


def find_user_by_name(users: Sequence[Sequence[str]], name: str, config) -> Optional[int]:
    for idx, user in enumerate(users):
        if same_text(cell(user, config.USER_COL_NAME), name):
            return idx
    return None


def parse_serial(value) -> Optional[float]:
    """Numeric serial from a cell, or None for blank / non-numeric."""
    text = str(value if value is not None else "").strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def next_serial(users: Sequence[Sequence[str]], config) -> int:
    serials = [parse_serial(cell(user, config.USER_COL_SR)) for user in users]
    serials = [s for s in serials if s is not None]
    return math.floor(max(serials)) + 1 if serials else 1


def derive_userid(name: str, post: str, dcode: str, serial: int) -> str:
    """Short, lossy identifier: e.g. ("Ravi Kumar", "JE", "12", 1) -> "ravje1201"."""
    return (name[:3] + post[:2] + str(dcode)[-2:] + f"{serial:02d}"[-2:]).lower()


def _requested_panchayats(value) -> List[str]:
    # Form posts deliver a comma-joined string instead of a list
    if isinstance(value, str):
        return split_panchayats(value)
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    return []


def append_or_update_user(store, config, payload):
    """
    PURPOSE: Create a registry entry, or merge grants into an existing one.

    LOGIC:
      - name, post and a non-empty panchayats list are required
      - Existing name (trimmed, case-insensitive): merge panchayats into
        column D, then overwrite post in column C (two writes, no rollback)
      - New name: next serial, default dcode, derived userid, one append

    RETURNS:
      dict: {action: 'updated', row} or {action: 'created', sr, userid}

    RAISES:
      MissingFieldsError: If a required field is missing
    """
    payload = payload or {}
    name = str(payload.get("name") or "").strip()
    post = str(payload.get("post") or "").strip()
    panchayats = _requested_panchayats(payload.get("panchayats"))

    if not name or not post or not panchayats:
        raise MissingFieldsError()

    users = read_users(store, config)
    found = find_user_by_name(users, name, config)

    if found is not None:
        row_num = found + 1 + config.USER_HEADER_ROWS
        existing = split_panchayats(cell(users[found], config.USER_COL_PANCHAYATS))
        merged = unique(existing + panchayats)

        store.write_range(config.USER_SHEET, f"{config.USER_PANCHAYATS_LETTER}{row_num}",
                          [[join_panchayats(merged)]])
        store.write_range(config.USER_SHEET, f"{config.USER_POST_LETTER}{row_num}",
                          [[post]])

        log_msg(f"[OK] Updated user '{name}' at row {row_num} ({len(merged)} panchayats)")
        return {"action": "updated", "row": row_num}

    sr = next_serial(users, config)
    dcode = str(payload.get("dcode") or "").strip() or config.DEFAULT_DCODE
    userid = derive_userid(name, post, dcode, sr)

    store.append_rows(config.USER_SHEET, config.USER_APPEND_RANGE,
                      [[sr, name, post, join_panchayats(unique(panchayats)), dcode, userid]])

    log_msg(f"[OK] Created user '{name}' sr={sr} userid={userid}")
    return {"action": "created", "sr": sr, "userid": userid}


def validate_user(store, config, payload):
    """
    Match ``payload.input`` against registry names and userids.

    A miss is a normal answer ({valid: False}), not an error.
    """
    payload = payload or {}
    text = str(payload.get("input") or "").strip()
    if not text:
        raise NoInputError()

    users = read_users(store, config)
    found = find_user(users, text, config)
    if found is None:
        print_info(f"No user matches '{text}'")
        return {"valid": False}

    user = users[found]
    return {
        "valid": True,
        "name": cell(user, config.USER_COL_NAME),
        "userid": cell(user, config.USER_COL_USERID),
        "panchayats": split_panchayats(cell(user, config.USER_COL_PANCHAYATS)),
    }


def allowed_panchayats(store, config, userid) -> List[str]:
    """Case-folded panchayat grants of the user matching ``userid``; [] if none."""
    text = str(userid or "").strip()
    if not text:
        return []
    users = read_users(store, config)
    found = find_user(users, text, config)
    if found is None:
        return []
    grants = split_panchayats(cell(users[found], config.USER_COL_PANCHAYATS))
    return [gp.lower() for gp in grants]
