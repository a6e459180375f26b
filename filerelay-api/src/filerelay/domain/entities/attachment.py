"""Attachment metadata reported back by the webhook."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class AttachmentDescriptor(BaseModel):
    """
    One stored attachment as described by the webhook response.

    Field names follow the webhook's JSON 1:1. Nothing is required and
    unknown keys are kept, so the descriptor round-trips to the caller
    exactly as the webhook sent it.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    filename: Any = None
    size: Any = None
    url: Any = None
    proxy_url: Any = None
