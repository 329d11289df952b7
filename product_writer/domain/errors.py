"""
Errors - Typed Failures for Description Generation
===================================================

Every failure a caller can see is a subclass of DescriptionError, so the
web and CLI surfaces can catch one type and show `str(error)` to the user.

    DescriptionError
    ├── ValidationError          missing product field, nothing sent
    ├── MissingCredentialError   no API key configured
    ├── TransportError           non-2xx status or no response at all
    ├── MalformedResponseError   body does not match the response envelope
    └── EmptyResponseError       envelope is fine but holds no text
"""

from typing import Any, Optional


class DescriptionError(Exception):
    """Base exception for description generation errors."""
    pass


class ValidationError(DescriptionError):
    """A required product field is empty."""

    def __init__(self, missing_fields: Optional[list[str]] = None):
        self.missing_fields = missing_fields or []
        super().__init__("Please fill in all fields")


class MissingCredentialError(DescriptionError):
    """No Gemini API key was configured at startup."""

    def __init__(self, message: str = "API key is not configured"):
        super().__init__(message)


class TransportError(DescriptionError):
    """
    The HTTP call did not return a 2xx response.

    status_code is None when no response was received at all
    (DNS failure, refused connection).
    """

    def __init__(
        self,
        status_code: Optional[int],
        reason: str = "",
        body: Any = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.body = body

        if status_code is None:
            message = f"API call failed: {reason}"
        else:
            message = f"API call failed: {status_code} {reason}".rstrip()
        if body:
            message += f"\nDetails: {body}"
        super().__init__(message)


class MalformedResponseError(DescriptionError):
    """Response body is not the JSON envelope the API documents."""

    def __init__(self, message: str = "Invalid response format from API"):
        super().__init__(message)


class EmptyResponseError(DescriptionError):
    """Response envelope carried no usable text."""

    def __init__(self, message: str = "No description was generated. Please try again."):
        super().__init__(message)
