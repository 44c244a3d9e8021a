from __future__ import annotations

from typing import BinaryIO, List, Optional

from ..common.validators import require_non_empty
from ..core.constants import (
    ALLOWED_UPLOAD_EXTENSIONS,
    CLASS_TIMETABLES_FOLDER,
    EXAM_TIMETABLES_FOLDER,
    MAX_GALLERY_IMAGES,
    UPLOADS_FOLDER,
)
from ..core.exceptions import ValidationError
from .model import StoredFile
from .storage import MediaStorage


def allowed_file(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_UPLOAD_EXTENSIONS


class MediaService:
    def __init__(self, storage: MediaStorage):
        self._storage = storage

    def upload_image(self, filename: Optional[str], stream: Optional[BinaryIO]) -> StoredFile:
        if stream is None or not filename:
            raise ValidationError("No file uploaded")
        if not allowed_file(filename):
            raise ValidationError("Only jpg and png files are allowed")
        return self._storage.save(UPLOADS_FOLDER, filename, stream)

    def list_gallery(self, *, limit: int = MAX_GALLERY_IMAGES) -> List[str]:
        files = sorted(self._storage.list_files(UPLOADS_FOLDER), key=lambda f: f.created_at, reverse=True)
        return [f.url for f in files[:limit]]

    def list_timetables(self, class_name, *, exam: bool = False) -> List[StoredFile]:
        class_name = require_non_empty(class_name, "class")
        base = EXAM_TIMETABLES_FOLDER if exam else CLASS_TIMETABLES_FOLDER
        return list(self._storage.list_files(f"{base}/{class_name}"))
