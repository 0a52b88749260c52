"""
================================================================================
HANDLER.PY - SERVERLESS ENTRY POINT
================================================================================
PURPOSE: The single HTTP endpoint. Decodes the platform event, dispatches the
         requested action against the spreadsheet and wraps the result in the
         {ok, ...} JSON envelope.

ACTIONS:
  getDropdownData     -> {ok, data}
  getFilteredData     -> {ok, rows}
  appendOrUpdateUser  -> {ok, result}
  validateUser        -> {ok, user}

STATUS CODES:
  200 success | 400 bad input / unknown action | 405 bad method
  500 credential, config, spreadsheet or unexpected failure (never retried)
================================================================================
"""

import base64
import json
from urllib.parse import parse_qsl

from config import Config
from core.dropdown import get_dropdown_data
from core.errors import ApiError, MissingActionError, UnknownActionError
from core.filtering import get_filtered_data
from core.logger import log_exception, log_msg, print_info
from core.sheets import SheetsStore
from core.users import append_or_update_user, validate_user

# Built once per container; every invocation reuses it
CONFIG = Config.from_env()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

FILTER_FIELDS = ("engineer", "gp", "work", "status", "year", "search")
PAYLOAD_FIELDS = ("userid", "input", "name", "post", "panchayats", "dcode")


def _dropdown(store, config, payload):
    return {"data": get_dropdown_data(store, config)}


def _filtered(store, config, payload):
    return get_filtered_data(store, config, payload)


def _upsert(store, config, payload):
    return {"result": append_or_update_user(store, config, payload)}


def _validate(store, config, payload):
    return {"user": validate_user(store, config, payload)}


ACTIONS = {
    "getDropdownData": _dropdown,
    "getFilteredData": _filtered,
    "appendOrUpdateUser": _upsert,
    "validateUser": _validate,
}

# ==================== ENVELOPE ====================

def respond(status_code, body=None):
    headers = {"Content-Type": "application/json", **CORS_HEADERS}
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": "" if body is None else json.dumps(body),
    }


def _header(event, name):
    for key, value in (event.get("headers") or {}).items():
        if key.lower() == name.lower():
            return value or ""
    return ""


def _method(event):
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "GET").upper()


def _body_text(event):
    body = event.get("body") or ""
    if event.get("isBase64Encoded") and body:
        body = base64.b64decode(body).decode("utf-8")
    return body


def payload_from_params(params):
    """Flat query / form parameters -> payload with a nested filter."""
    payload = {field: params[field] for field in PAYLOAD_FIELDS if params.get(field)}
    filters = {field: params[field] for field in FILTER_FIELDS if params.get(field)}
    if filters:
        payload["filter"] = filters
    return payload


def parse_request(event):
    """
    PURPOSE: Pull (action, payload) out of a platform event.

    LOGIC:
      - GET: query parameters, flat
      - POST JSON: {action, payload}; action may also sit in payload.action
        or the query string; a top-level "input" is folded into the payload
      - POST form-urlencoded (or non-JSON body): flat key/value pairs

    RAISES:
      ValueError: If a JSON body can't be decoded
    """
    query = event.get("queryStringParameters") or {}

    if _method(event) != "POST":
        return query.get("action"), payload_from_params(query)

    text = _body_text(event)
    content_type = _header(event, "Content-Type").lower()

    if "application/x-www-form-urlencoded" in content_type:
        params = dict(parse_qsl(text))
        return params.get("action") or query.get("action"), payload_from_params(params)

    try:
        body = json.loads(text) if text.strip() else {}
    except ValueError:
        if "json" in content_type:
            raise
        params = dict(parse_qsl(text))
        return params.get("action") or query.get("action"), payload_from_params(params)

    if not isinstance(body, dict):
        body = {}

    payload = body.get("payload")
    if not isinstance(payload, dict):
        payload = {}
    if "input" in body and "input" not in payload:
        payload = {**payload, "input": body["input"]}

    action = body.get("action") or payload.get("action") or query.get("action")
    return action, payload

# ==================== DISPATCH ====================

def handle_request(event, config, store_factory=SheetsStore.from_config):
    """
    PURPOSE: Process one request end to end.

    ARGS:
      event (dict): Platform event (Netlify / Lambda proxy shape)
      config (Config): Process configuration
      store_factory (callable): Builds the spreadsheet store from config

    RETURNS:
      dict: {statusCode, headers, body}
    """
    method = _method(event)
    if method == "OPTIONS":
        return respond(200)
    if method not in ("GET", "POST"):
        return respond(405, {"ok": False, "error": "Method not allowed"})

    try:
        action, payload = parse_request(event)
        if not action:
            raise MissingActionError()
        operation = ACTIONS.get(action)
        if operation is None:
            raise UnknownActionError()

        print_info(f"{method} {action}")
        store = store_factory(config)
        result = operation(store, config, payload)
        return respond(200, {"ok": True, **result})

    except ApiError as e:
        if e.status_code >= 500:
            log_exception("Request failed", e)
        else:
            log_msg(f"[WARN] Bad request: {e}")
        return respond(e.status_code, {"ok": False, "error": str(e)})

    except Exception as e:
        log_exception("Unexpected failure", e)
        return respond(500, {"ok": False, "error": str(e)})


def handler(event, context=None):
    """Platform entry point."""
    return handle_request(event or {}, CONFIG)
