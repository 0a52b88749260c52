"""Diagnostic endpoint: reports whether the spreadsheet id and credentials are configured."""

import json

from config import Config
from core.logger import log_msg

CONFIG = Config.from_env()


def describe(config):
    return {
        "ok": True,
        "spreadsheet": config.spreadsheet_id or None,
        "hasCreds": config.has_credentials,
    }


def handler(event=None, context=None):
    body = describe(CONFIG)
    log_msg(f"[INFO] envtest spreadsheet={'set' if body['spreadsheet'] else 'missing'} "
            f"creds={'set' if body['hasCreds'] else 'missing'}")
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
