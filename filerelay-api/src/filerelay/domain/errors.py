"""Errors raised by the relay pipeline.

Every error carries the HTTP status the upload endpoint answers with, so the
boundary can map failures without inspecting their type.
"""

from __future__ import annotations


class FileRelayError(Exception):
    """Base class for all relay pipeline errors."""

    status_code: int = 500


class ValidationError(FileRelayError):
    """The request carried neither files nor URLs, or carried malformed ones."""

    status_code = 400


class ConfigurationError(FileRelayError):
    """A required setting (the webhook endpoint) is missing."""


class FetchError(FileRelayError):
    """A remote URL could not be downloaded."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class RelayError(FileRelayError):
    """The webhook call failed or returned no attachments."""


class TransportError(FileRelayError):
    """Raised by the HTTP adapter when a request errors or gets a non-2xx reply."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.upstream_status = status_code


class InvalidApiKeyError(Exception):
    """The x-api-key header did not match the configured key."""


class PayloadTooLargeError(ValidationError):
    """An uploaded file exceeds the configured size limit."""

    status_code = 413
