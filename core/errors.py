"""Error taxonomy for the sheet API. Each error knows the HTTP status it maps to."""


class ApiError(Exception):
    """Base class for errors that are surfaced to the caller."""

    status_code = 500


class BadRequestError(ApiError):
    status_code = 400


class MissingActionError(BadRequestError):
    def __init__(self, message="no action"):
        super().__init__(message)


class UnknownActionError(BadRequestError):
    def __init__(self, message="unknown action"):
        super().__init__(message)


class MissingFieldsError(BadRequestError):
    def __init__(self, message="Missing required fields"):
        super().__init__(message)


class NoInputError(BadRequestError):
    def __init__(self, message="no input"):
        super().__init__(message)


class AuthConfigError(ApiError):
    """Credentials or spreadsheet id missing / unparseable."""


class RemoteStoreError(ApiError):
    """Any failure from the spreadsheet API; the message is passed through."""
