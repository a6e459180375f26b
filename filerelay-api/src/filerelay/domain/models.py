"""Domain models for the relay pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel

from filerelay.domain.entities.attachment import AttachmentDescriptor
from filerelay.domain.entities.uploaded_file import UploadedFile

T = TypeVar("T")


@dataclass(frozen=True)
class Single(Generic[T]):
    """Exactly one value was submitted."""

    value: T

    def items(self) -> list[T]:
        return [self.value]


@dataclass(frozen=True)
class Many(Generic[T]):
    """A list of values was submitted (possibly of length one)."""

    values: tuple[T, ...]

    def items(self) -> list[T]:
        return list(self.values)


OneOrMany = Union[Single[T], Many[T]]


def one_or_many(values: list[T]) -> OneOrMany[T] | None:
    """Resolve a list of submitted values into a tagged variant (None if empty)."""
    if not values:
        return None
    if len(values) == 1:
        return Single(values[0])
    return Many(tuple(values))


@dataclass(frozen=True)
class RelayRequest:
    """
    Input to the upload endpoint.

    Direct files take precedence over URLs: when both are present the URLs
    are ignored.
    """

    files: OneOrMany[UploadedFile] | None = None
    urls: OneOrMany[str] | None = None

    @property
    def is_empty(self) -> bool:
        return self.files is None and self.urls is None


class RelayResult(BaseModel):
    """Response envelope returned by the upload endpoint."""

    success: bool
    message: str | None = None
    attachments: list[AttachmentDescriptor] | None = None
    error: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize without unset keys, keeping attachments verbatim."""
        payload: dict[str, Any] = {"success": self.success}
        if self.message is not None:
            payload["message"] = self.message
        if self.attachments is not None:
            payload["attachments"] = [a.model_dump(exclude_unset=True) for a in self.attachments]
        if self.error is not None:
            payload["error"] = self.error
        return payload


@dataclass(frozen=True)
class RelayOutcome:
    """A RelayResult paired with the HTTP status it should be sent with."""

    status_code: int
    result: RelayResult
