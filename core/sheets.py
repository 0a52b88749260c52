"""
================================================================================
SHEETS.PY - GOOGLE SHEETS OPERATIONS
================================================================================
PURPOSE: Handle all Google Sheets API interactions: service-account
         authentication and the range-based read / write / append surface the
         request handler works against.

FEATURES:
  - Google Sheets API authentication (base64 or raw JSON service account key)
  - Range reads returning sparse rows of strings
  - RAW range overwrites and row appends
  - Every API failure surfaced as RemoteStoreError
================================================================================
"""

import base64
import binascii
import json

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.exceptions import GSpreadException
from gspread.utils import absolute_range_name

from .errors import AuthConfigError, RemoteStoreError
from .logger import log_msg

STORE_ERRORS = (GSpreadException, GoogleAuthError, requests.RequestException)

# ==================== GOOGLE AUTH ====================

def load_service_account_info(config):
    """
    PURPOSE: Decode the service account key from the first configured source.

    LOGIC:
      - Sources are checked in Config.CREDENTIAL_SOURCES order
      - Base64 sources are decoded to UTF-8 text first
      - The text is parsed as JSON and must be an object

    RETURNS:
      tuple: (source env name, key dict)

    RAISES:
      AuthConfigError: If no source is set or the value can't be parsed
    """
    source = config.credential_source()
    if source is None:
        names = " / ".join(name for name, _ in config.CREDENTIAL_SOURCES)
        raise AuthConfigError(f"Google credentials not set (checked {names})")

    name, raw, is_base64 = source
    try:
        text = base64.b64decode(raw).decode("utf-8") if is_base64 else raw
        info = json.loads(text)
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise AuthConfigError(f"Failed to parse {name}: {e}") from e

    if not isinstance(info, dict):
        raise AuthConfigError(f"Failed to parse {name}: expected a JSON object")

    return name, info


def authenticate_google(config):
    """
    PURPOSE: Authenticate with Google Sheets API using a service account.

    RETURNS:
      gspread.Client: Authorized Sheets client

    RAISES:
      AuthConfigError: If credentials are missing or invalid
    """
    source, info = load_service_account_info(config)
    try:
        credentials = Credentials.from_service_account_info(info, scopes=config.SCOPES)
    except (ValueError, KeyError) as e:
        raise AuthConfigError(f"Invalid service account key in {source}: {e}") from e

    client = gspread.authorize(credentials)
    log_msg(f"[AUTH] Google Sheets client ready ({source})")
    return client

# ==================== SHEETS STORE ====================

class SheetsStore:
    """
    PURPOSE: Range-based access to one spreadsheet.

    ATTRIBUTES:
      client (gspread.Client): Authorized Sheets API client
      spreadsheet_id (str): Target spreadsheet key
    """

    def __init__(self, client, spreadsheet_id: str):
        self.client = client
        self.spreadsheet_id = spreadsheet_id
        self._ss = None

    @classmethod
    def from_config(cls, config):
        """
        Validate the configuration, authenticate and bind a store to the
        configured spreadsheet. Raises AuthConfigError naming every missing
        setting.
        """
        config.validate()
        return cls(authenticate_google(config), config.spreadsheet_id)

    @property
    def ss(self):
        if self._ss is None:
            try:
                self._ss = self.client.open_by_key(self.spreadsheet_id)
            except STORE_ERRORS as e:
                raise RemoteStoreError(str(e)) from e
        return self._ss

    def read_range(self, sheet_name: str, range_spec: str):
        """
        PURPOSE: Read a range. Rows are sparse: trailing empty cells may be
                 missing, fully empty trailing rows are omitted.

        RETURNS:
          list[list[str]]
        """
        name = absolute_range_name(sheet_name, range_spec)
        try:
            response = self.ss.values_get(name)
        except STORE_ERRORS as e:
            raise RemoteStoreError(str(e)) from e

        values = response.get("values", [])
        log_msg(f"[API] Read {len(values)} rows from {name}")
        return [["" if cell is None else str(cell) for cell in row] for row in values]

    def write_range(self, sheet_name: str, range_spec: str, values):
        """Overwrite ``range_spec`` with ``values`` (RAW input)."""
        name = absolute_range_name(sheet_name, range_spec)
        try:
            self.ss.values_update(
                name,
                params={"valueInputOption": "RAW"},
                body={"values": values},
            )
        except STORE_ERRORS as e:
            raise RemoteStoreError(str(e)) from e
        log_msg(f"[API] Wrote {name}")

    def append_rows(self, sheet_name: str, range_spec: str, values):
        """Append ``values`` after the last populated row of the range."""
        name = absolute_range_name(sheet_name, range_spec)
        try:
            self.ss.values_append(
                name,
                params={"valueInputOption": "RAW"},
                body={"values": values},
            )
        except STORE_ERRORS as e:
            raise RemoteStoreError(str(e)) from e
        log_msg(f"[API] Appended {len(values)} rows to {name}")
