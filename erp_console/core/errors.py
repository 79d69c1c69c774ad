"""
Exceptions raised by the ERP console and the shared error-message helper.

The ERP backend does not classify its errors: a failed call is an HTTP status
plus an optional JSON body carrying `error` or `message`. 401 is the only
status with a global side effect (session expiry).
"""
from typing import Any, Optional


class ErpConsoleError(Exception):
    """Base class for all console errors"""


class ErpApiError(ErpConsoleError):
    """
    A failed call to the ERP backend.

    Attributes:
        status_code: HTTP status, or None when the request never got a response
        payload: Decoded JSON body of the error response (if any)
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @property
    def body_message(self) -> Optional[str]:
        """The `error` or `message` field of the response body"""
        if isinstance(self.payload, dict):
            for key in ("error", "message"):
                value = self.payload.get(key)
                if isinstance(value, str) and value:
                    return value
        return None


class SessionExpiredError(ErpApiError):
    """The backend answered 401; the stored token has been cleared"""

    def __init__(self, redirect_to: str = "/login", payload: Any = None):
        super().__init__("Session expired", status_code=401, payload=payload)
        self.redirect_to = redirect_to


class FormValidationError(ErpConsoleError):
    """Client-side validation failed; nothing was sent to the backend"""


class UnknownResourceError(ErpConsoleError):
    """Unregistered module/resource, or an operation the resource does not support"""


def get_error_message(err: BaseException, fallback: str) -> str:
    """
    Message to show the user for a failed operation.

    Uses the backend's `error` field, then its `message` field, then the text
    of a client-side validation error, and finally `fallback`.
    """
    if isinstance(err, ErpApiError):
        return err.body_message or fallback
    if isinstance(err, (FormValidationError, UnknownResourceError)) and str(err):
        return str(err)
    return fallback
