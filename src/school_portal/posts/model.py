from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Post:
    title: str
    description: str
    timestamp: str
