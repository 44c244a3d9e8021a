from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional

from .connection import DatabaseConnection


@contextmanager
def read_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Dictionary cursor on a short-lived connection. The portal never writes to MySQL."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
        finally:
            cur.close()
    finally:
        conn.close()


def _plain(value: Any) -> Any:
    # DECIMAL columns (marks) come back as Decimal; JSON wants numbers.
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def _plain_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return {k: _plain(v) for k, v in row.items()}


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return _plain_row(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    return [_plain_row(r) for r in cur.fetchall() or []]
