"""
Configuration Manager for the GP Works Sheet API
Handles all environment variables and settings
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from core.errors import AuthConfigError

# Get script directory
SCRIPT_DIR = Path(__file__).parent.absolute()

# Load .env file (local development only; hosted functions get real env vars)
env_path = SCRIPT_DIR / '.env'
if env_path.exists():
    load_dotenv(env_path)


class Config:
    """Central configuration object, built once per process and passed to the handler"""

    # Credential sources, in precedence order: (env var, is base64)
    CREDENTIAL_SOURCES = (
        ('GOOGLE_CREDENTIALS_BASE64', True),
        ('GOOGLE_CREDENTIALS_JSON', False),
        ('GOOGLE_SVC_BASE64', True),
    )

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    # Sheet Names
    DATA_SHEET = "Sheet11"
    USER_SHEET = "userid"

    # Ranges
    UPDATE_TIME_CELL = "A2"
    DATA_RANGE = "A5:V"
    USER_RANGE = "A2:F"
    USER_APPEND_RANGE = "A:F"

    # Data sheet columns (0-based)
    COL_SR = 0
    COL_ENGINEER = 1
    COL_GP = 2
    COL_WORK = 3
    COL_NAME = 4
    COL_YEAR = 5
    COL_STATUS = 6

    # Filter field -> data column
    FILTER_COLUMNS = {
        "engineer": COL_ENGINEER,
        "gp": COL_GP,
        "work": COL_WORK,
        "status": COL_STATUS,
        "year": COL_YEAR,
    }

    # User registry columns (0-based) and their sheet letters
    USER_COL_SR = 0
    USER_COL_NAME = 1
    USER_COL_POST = 2
    USER_COL_PANCHAYATS = 3
    USER_COL_DCODE = 4
    USER_COL_USERID = 5
    USER_POST_LETTER = "C"
    USER_PANCHAYATS_LETTER = "D"
    USER_HEADER_ROWS = 1

    DEFAULT_DCODE = "77"

    def __init__(self, spreadsheet_id='', credentials_base64='', credentials_json='',
                 legacy_credentials_base64=''):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_base64 = credentials_base64
        self.credentials_json = credentials_json
        self.legacy_credentials_base64 = legacy_credentials_base64

    @classmethod
    def from_env(cls, environ=None):
        """Build a Config from ``environ`` (defaults to ``os.environ``)"""
        env = os.environ if environ is None else environ
        return cls(
            spreadsheet_id=env.get('SPREADSHEET_ID', '').strip(),
            credentials_base64=env.get('GOOGLE_CREDENTIALS_BASE64', '').strip(),
            credentials_json=env.get('GOOGLE_CREDENTIALS_JSON', '').strip(),
            legacy_credentials_base64=env.get('GOOGLE_SVC_BASE64', '').strip(),
        )

    def _raw_credentials(self):
        return {
            'GOOGLE_CREDENTIALS_BASE64': self.credentials_base64,
            'GOOGLE_CREDENTIALS_JSON': self.credentials_json,
            'GOOGLE_SVC_BASE64': self.legacy_credentials_base64,
        }

    def credential_source(self):
        """
        Return ``(env_name, raw_value, is_base64)`` for the first credential
        source that is set, or ``None`` when none is.
        """
        raw = self._raw_credentials()
        for name, is_base64 in self.CREDENTIAL_SOURCES:
            if raw[name]:
                return name, raw[name], is_base64
        return None

    @property
    def has_credentials(self):
        return self.credential_source() is not None

    def validate(self):
        """Validate critical configuration"""
        errors = []

        if not self.spreadsheet_id:
            errors.append("SPREADSHEET_ID is required")

        if not self.has_credentials:
            names = " / ".join(name for name, _ in self.CREDENTIAL_SOURCES)
            errors.append(f"Google credentials required ({names})")

        if errors:
            raise AuthConfigError("; ".join(errors))

        return True
