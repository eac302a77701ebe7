"""Typed errors raised by the log and report services.

Routers do not catch these; ``main.py`` maps every ``TrackerError`` to a JSON
response with the message as ``detail``.
"""


class TrackerError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TrackerValidationError(TrackerError):
    """Bad date/time format, out-of-range hours, incomplete report data."""

    status_code = 400


class DuplicateLogError(TrackerValidationError):
    status_code = 409


class NotFoundError(TrackerError):
    status_code = 404


class SyncError(TrackerError):
    """A read or write against the log collection failed."""

    status_code = 503


class RevisionConflictError(SyncError):
    status_code = 409
