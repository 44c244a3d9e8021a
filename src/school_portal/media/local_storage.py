from __future__ import annotations

import logging
import shutil
import uuid
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, List
from urllib.parse import quote

from werkzeug.utils import secure_filename

from ..core.exceptions import StorageError, ValidationError
from .model import MediaConfig, StoredFile
from .storage import MediaStorage

logger = logging.getLogger(__name__)


class LocalMediaStorage(MediaStorage):
    """Files under ``root_dir``, published under ``url_prefix``.

    ``file_id`` is the path relative to ``root_dir``.
    """

    def __init__(self, config: MediaConfig):
        self._root = Path(config.root_dir).resolve()
        self._url_prefix = config.url_prefix.rstrip("/")

    def _folder_path(self, folder: str) -> Path:
        path = (self._root / folder).resolve()
        if path != self._root and self._root not in path.parents:
            raise StorageError(f"Folder outside media root: {folder!r}")
        return path

    def _to_stored(self, path: Path) -> StoredFile:
        rel = path.relative_to(self._root).as_posix()
        return StoredFile(
            file_id=rel,
            name=path.name,
            url=f"{self._url_prefix}/{quote(rel)}",
            created_at=datetime.fromtimestamp(path.stat().st_mtime),
        )

    def save(self, folder: str, filename: str, stream: BinaryIO) -> StoredFile:
        safe_name = secure_filename(filename)
        if not safe_name:
            raise ValidationError("Invalid file name")

        target_dir = self._folder_path(folder)
        target = target_dir / f"{uuid.uuid4().hex[:12]}_{safe_name}"
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with target.open("wb") as out:
                shutil.copyfileobj(stream, out)
        except OSError as e:
            raise StorageError(f"Cannot store {safe_name}: {e}") from e

        logger.info("Stored upload %s", target)
        return self._to_stored(target)

    def list_files(self, folder: str) -> List[StoredFile]:
        path = self._folder_path(folder)
        if not path.is_dir():
            return []
        try:
            return [self._to_stored(p) for p in sorted(path.iterdir()) if p.is_file()]
        except OSError as e:
            raise StorageError(f"Cannot list {folder}: {e}") from e
