from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MediaConfig:
    root_dir: str
    url_prefix: str = "/media"


@dataclass(frozen=True)
class StoredFile:
    file_id: str
    name: str
    url: str
    created_at: datetime
