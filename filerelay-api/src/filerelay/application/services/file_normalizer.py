"""Turns the "one file or many files" input shape into a plain list."""

from __future__ import annotations

from collections.abc import Sequence

from filerelay.domain.entities.uploaded_file import UploadedFile
from filerelay.domain.models import Many, Single


class FileNormalizer:
    """Produces the ordered list of files the webhook relay expects."""

    def normalize(
        self,
        files: UploadedFile | Sequence[UploadedFile] | Single[UploadedFile] | Many[UploadedFile],
    ) -> list[UploadedFile]:
        if isinstance(files, list):
            return files
        if isinstance(files, (Single, Many)):
            return files.items()
        if isinstance(files, UploadedFile):
            return [files]
        return list(files)
