"""
Custom exception classes.

Represent errors raised by the conversion layer itself. Errors from the
formatting primitives (URL encoding, base64, JSON) propagate untranslated.
"""


class LamaError(Exception):
    """Base exception class for lama."""

    pass


class EventContextNotImplementedError(LamaError, NotImplementedError):
    """Raised when converting a request/response pair back to an event/context pair."""

    def __init__(self):
        super().__init__(
            "Converting a request/response pair to an event/context pair is not implemented"
        )
