"""
================================================================================
core/__init__.py - Package Initialization
================================================================================
PURPOSE: Makes the core folder a Python package and exposes the operations,
         store and error types for handler.py

EXPORTS:
  - SheetsStore, authenticate_google (from sheets)
  - get_dropdown_data (from dropdown)
  - get_filtered_data (from filtering)
  - append_or_update_user, validate_user (from users)
  - error classes (from errors)
  - log_msg, log_exception (from logger)
================================================================================
"""

from core.errors import (
    ApiError, BadRequestError, MissingActionError, UnknownActionError,
    MissingFieldsError, NoInputError, AuthConfigError, RemoteStoreError
)

from core.logger import (
    log_msg, log_exception, get_ist_time, get_timestamp_full,
    print_header, print_separator, print_success, print_error, print_info
)

from core.sheets import authenticate_google, load_service_account_info, SheetsStore

from core.dropdown import get_dropdown_data

from core.filtering import get_filtered_data

from core.users import append_or_update_user, validate_user, derive_userid

__all__ = [
    'ApiError', 'BadRequestError', 'MissingActionError', 'UnknownActionError',
    'MissingFieldsError', 'NoInputError', 'AuthConfigError', 'RemoteStoreError',
    'log_msg', 'log_exception', 'get_ist_time', 'get_timestamp_full',
    'print_header', 'print_separator', 'print_success', 'print_error', 'print_info',
    'authenticate_google', 'load_service_account_info', 'SheetsStore',
    'get_dropdown_data',
    'get_filtered_data',
    'append_or_update_user', 'validate_user', 'derive_userid',
]
