#!/usr/bin/env python3
"""
================================================================================
MAIN.PY - LOCAL RUNNER
================================================================================
PURPOSE: Invoke the serverless handler from a terminal against the real
         spreadsheet, using the same event shape the host delivers.

USAGE:
  python main.py envtest
  python main.py getDropdownData
  python main.py getFilteredData --engineer "A Kumar" --search gp1
  python main.py getFilteredData --userid ravje1201
  python main.py appendOrUpdateUser --name "Ravi Kumar" --post JE --panchayats GP1,GP2 --dcode 12
  python main.py validateUser --input ravje1201
================================================================================
"""

import argparse
import json
import sys

from rich import print_json

import envtest
import handler
from core.logger import (
    IS_SERVERLESS, get_timestamp_full, print_error, print_header, print_separator, print_success,
)


def build_event(args):
    """Turn parsed CLI arguments into a POST event with a JSON body."""
    payload = {}
    filters = {
        field: getattr(args, field)
        for field in handler.FILTER_FIELDS
        if getattr(args, field)
    }
    if filters:
        payload["filter"] = filters
    for field in ("userid", "input", "name", "post", "dcode"):
        value = getattr(args, field)
        if value:
            payload[field] = value
    if args.panchayats:
        payload["panchayats"] = [p.strip() for p in args.panchayats.split(",") if p.strip()]

    return {
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"action": args.action, "payload": payload}),
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the GP works sheet API locally")
    parser.add_argument("action", help="envtest or an API action name")
    for field in handler.FILTER_FIELDS:
        parser.add_argument(f"--{field}", default="", help=f"filter on {field}")
    parser.add_argument("--userid", default="", help="restrict rows to this user's panchayats")
    parser.add_argument("--input", default="", help="name or userid to validate")
    parser.add_argument("--name", default="")
    parser.add_argument("--post", default="")
    parser.add_argument("--panchayats", default="", help="comma separated")
    parser.add_argument("--dcode", default="")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.action == "envtest":
        response = envtest.handler({}, None)
    else:
        print_header("GP WORKS SHEET API", {
            "Action": args.action,
            "Spreadsheet": handler.CONFIG.spreadsheet_id or "(missing)",
            "Started": get_timestamp_full(),
        })
        response = handler.handler(build_event(args), None)

    status = response["statusCode"]
    body = json.loads(response["body"]) if response["body"] else {}

    print_separator()
    if IS_SERVERLESS:
        print(json.dumps(body, indent=2, ensure_ascii=False))
    else:
        print_json(data=body)
    print_separator()

    if status != 200:
        print_error(f"HTTP {status}")
        return 1
    print_success(f"HTTP {status}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
