"""Domain models and entities."""

from filerelay.domain.entities.attachment import AttachmentDescriptor
from filerelay.domain.entities.uploaded_file import UploadedFile
from filerelay.domain.errors import (
    ConfigurationError,
    FetchError,
    FileRelayError,
    InvalidApiKeyError,
    PayloadTooLargeError,
    RelayError,
    TransportError,
    ValidationError,
)
from filerelay.domain.models import (
    Many,
    OneOrMany,
    RelayOutcome,
    RelayRequest,
    RelayResult,
    Single,
    one_or_many,
)

__all__ = [
    "AttachmentDescriptor",
    "UploadedFile",
    "FileRelayError",
    "ValidationError",
    "ConfigurationError",
    "FetchError",
    "RelayError",
    "TransportError",
    "InvalidApiKeyError",
    "PayloadTooLargeError",
    "Single",
    "Many",
    "OneOrMany",
    "one_or_many",
    "RelayRequest",
    "RelayResult",
    "RelayOutcome",
]
