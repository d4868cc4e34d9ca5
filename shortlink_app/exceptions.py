"""
Errors raised by the link registry.

Each error carries the message that is safe to show a client and the HTTP
status it maps to; the exception handlers in main.py do the translation.
"""

from typing import Optional


class LinkError(Exception):
    """Base class for every error the service reports to clients."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LinkError):
    """Bad URL or code format, detected before any storage call."""

    status_code = 400
    default_message = "Invalid request"


class NotFound(LinkError):
    """No link exists for the requested code."""

    status_code = 404
    default_message = "Link not found"


class Conflict(LinkError):
    status_code = 409
    default_message = "Conflict"


class DuplicateCode(Conflict):
    """The code is already taken (raised from the unique constraint)."""

    default_message = "Code already exists"


class StorageError(LinkError):
    """
    Connectivity or query failure in the backing store.

    The client always sees the generic message; the cause is logged.
    """

    status_code = 500

    def __init__(self, detail: Optional[str] = None):
        super().__init__()
        self.detail = detail
