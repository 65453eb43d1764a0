"""
Fallback failure types and their user-facing translation.

describe_failure() maps the error that ended a fallback run onto the small
set of messages the frontend shows: quota, bad request, timeout, generic.
"""

from google.genai import errors

QUOTA_MESSAGE = "Request quota exceeded. Please wait a moment and try again."
BAD_REQUEST_MESSAGE = "Invalid request. Check the content, it may contain sensitive information."
TIMEOUT_MESSAGE = "The request took too long to respond (timeout)."
GENERIC_MESSAGE = "Could not get a response from the models. Please try again."


class FallbackError(Exception):
    """Base class for failures raised by the fallback executor."""


class EmptyResponseError(FallbackError):
    """A model answered, but with no usable text or a blocked finish reason."""

    def __init__(self, model: str, finish_reason=None):
        self.model = model
        self.finish_reason = finish_reason
        reason = finish_reason or "unknown"
        super().__init__(f"Empty or blocked response from {model} (reason: {reason})")


class AttemptTimeoutError(FallbackError):
    def __init__(self, model: str, timeout: float):
        self.model = model
        self.timeout = timeout
        super().__init__(f"{model} did not respond within {timeout}s")


class NoModelResponseError(FallbackError):
    def __init__(self):
        super().__init__("Could not get a response from any AI model.")


def describe_failure(exc: Exception) -> tuple[int, str]:
    """Return (status_code, message) for the error body sent to the caller."""
    status_code = 500
    message = GENERIC_MESSAGE
    if isinstance(exc, errors.APIError):
        status_code = exc.code or 500
        message = exc.message or GENERIC_MESSAGE

    if status_code == 429:
        message = QUOTA_MESSAGE
    elif status_code == 400:
        message = BAD_REQUEST_MESSAGE
    elif isinstance(exc, AttemptTimeoutError):
        message = TIMEOUT_MESSAGE

    return status_code, message
