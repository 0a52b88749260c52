"""
================================================================================
LOGGER.PY - LOGGING & CONSOLE OUTPUT
================================================================================
PURPOSE: Centralized logging for the sheet API with rich formatting for local
         runs and plain, flushed lines on the serverless host.

FEATURES:
  - Color-coded messages based on log tag ([OK], [ERROR], [API], ...)
  - Timestamp formatting (IST timezone)
  - Serverless mode (plain text output for Netlify / Lambda log collectors)
  - Rich console formatting for local development
================================================================================
"""

import os
import sys
import traceback
from datetime import datetime, timedelta, timezone
from colorama import init as colorama_init
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# Initialize colorama for Windows compatibility
colorama_init(autoreset=True)

# Rich console for fancy formatting
console = Console()

# Hosted functions ship stdout straight to the platform log
IS_SERVERLESS = any(
    os.getenv(name) for name in ("NETLIFY", "AWS_LAMBDA_FUNCTION_NAME", "CI")
)

IST_OFFSET = timedelta(hours=5, minutes=30)

# ==================== TIME UTILITIES ====================

def get_ist_time():
    """
    PURPOSE: Get current time in Indian Standard Time (UTC+05:30)

    RETURNS:
      datetime: Current time in IST (naive)
    """
    return datetime.now(timezone.utc).replace(tzinfo=None) + IST_OFFSET


def get_timestamp_short():
    """Short timestamp (HH:MM:SS) in IST."""
    return get_ist_time().strftime('%H:%M:%S')


def get_timestamp_full():
    """Full timestamp (DD-MMM-YY HH:MM AM/PM) in IST."""
    return get_ist_time().strftime('%d-%b-%y %I:%M %p')

# ==================== LOGGING FUNCTIONS ====================

LEVEL_STYLES = (
    ("[OK]", "green"),
    ("[ERROR]", "red"),
    ("[WARN]", "yellow"),
    ("[API]", "blue"),
    ("[AUTH]", "cyan"),
)


def log_msg(message: str, style: str = None):
    """
    PURPOSE: Log a message with automatic level detection and formatting

    LOGIC:
      - Parse message for level tags ([OK], [ERROR], ...)
      - Pick a style for the tag
      - Plain text when serverless, rich console otherwise

    ARGS:
      message (str): Message to log
      style (str, optional): Rich style override
    """
    ts = get_timestamp_short()
    text = str(message)
    detected_style = style

    if detected_style is None:
        upper = text.upper()
        for tag, tag_style in LEVEL_STYLES:
            if tag in upper:
                detected_style = tag_style
                break

    if IS_SERVERLESS:
        print(f"[{ts}] {text}")
        sys.stdout.flush()
    else:
        console.print(f"[bold]{ts}[/bold] {escape(text)}", style=detected_style,
                      highlight=False)


def log_exception(message: str, exc: BaseException):
    """Log an error line followed by the exception traceback."""
    log_msg(f"[ERROR] {message}: {exc}")
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    if IS_SERVERLESS:
        print(tb, end="")
        sys.stdout.flush()
    else:
        console.print(tb, style="red", markup=False, highlight=False, end="")


def print_header(title: str, data: dict = None):
    """
    PURPOSE: Print a formatted header panel with configuration/status info

    ARGS:
      title (str): Header title
      data (dict, optional): Key-value pairs to display
    """
    if IS_SERVERLESS:
        print(f"\n{'=' * 70}")
        print(f"  {title}")
        print(f"{'=' * 70}")
        if data:
            for key, value in data.items():
                print(f"  {key}: {value}")
        return

    header = Table.grid(padding=(0, 2))
    header.add_column(justify="left")
    if data:
        for key, value in data.items():
            header.add_row(f"{key}: {value}")

    console.print(Panel(header, title=title, border_style="magenta"))


def print_separator(char: str = "="):
    print(char * 70)


def print_success(message: str):
    log_msg(f"[OK] {message}")


def print_error(message: str):
    log_msg(f"[ERROR] {message}")


def print_info(message: str):
    log_msg(f"[INFO] {message}")
