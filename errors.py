# errors.py
from __future__ import annotations


class SchedulingError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SchedulingError):
    """Malformed or missing input."""
    status_code = 400


class NotFoundError(SchedulingError):
    """A referenced person does not exist."""
    status_code = 404


class ConflictError(SchedulingError):
    """Duplicate email or a double-booked slot."""
    status_code = 409
