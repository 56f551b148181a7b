# Classifies provider failures as transient (retry) or terminal.

from __future__ import annotations
from typing import Optional

RETRYABLE_STATUS_CODES = frozenset({429, 503})

HIGH_TRAFFIC_MESSAGE = "I'm currently experiencing very high traffic. Please try again in a few moments."
SYSTEM_ERROR_MESSAGE = "I apologize, but I encountered a system error. Please try again later."


def status_code_of(error: BaseException) -> Optional[int]:
    """Structured HTTP status carried by the exception, if any.

    google.genai.errors.APIError exposes it as ``code``; requests/httpx style
    errors use ``status_code``.
    """
    for attr in ("code", "status_code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def describe(error: BaseException) -> str:
    """Error text for logs; falls back to the class name when str() fails."""
    try:
        return str(error)
    except Exception:
        return f"<{type(error).__name__}>"


def transient_status(error: BaseException) -> Optional[int]:
    """429 or 503 when the error is retryable, else None."""
    code = status_code_of(error)
    if code is not None:
        return code if code in RETRYABLE_STATUS_CODES else None
    # no structured code: look for the status in the message text
    message = str(error)
    return next((status for status in sorted(RETRYABLE_STATUS_CODES) if str(status) in message), None)


def is_transient(error: BaseException) -> bool:
    return transient_status(error) is not None
