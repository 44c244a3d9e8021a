from __future__ import annotations

from typing import BinaryIO, Protocol, Sequence

from .model import StoredFile


class MediaStorage(Protocol):
    """Object storage for uploaded images and timetable PDFs, addressed by folder."""

    def save(self, folder: str, filename: str, stream: BinaryIO) -> StoredFile:
        raise NotImplementedError

    def list_files(self, folder: str) -> Sequence[StoredFile]:
        raise NotImplementedError
