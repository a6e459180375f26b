from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)
