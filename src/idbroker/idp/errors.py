"""
Errors raised while decoding identity provider configuration.
"""

from typing import Optional


class DecodeError(ValueError):
    """Base class for identity provider decode failures."""


class UnrecognizedTypeError(DecodeError):
    """The type tag is not one of the supported identity providers."""

    def __init__(self, provider_type: str):
        self.type = provider_type
        super().__init__(f"unrecognised identity provider type {provider_type!r}")


class MissingFieldError(DecodeError):
    """A required keystone field is absent or empty."""

    def __init__(self, field: str, context: Optional[str] = None):
        self.field = field
        message = f"{field} not specified"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)


class UnderlyingDecodeError(DecodeError):
    """The record could not be decoded into the expected structure."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
