from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)


def strip_database_statements(sql: str) -> str:
    """Drop CREATE DATABASE / USE lines so the target database comes from settings."""
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    return re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)


def split_statements(sql: str) -> Iterable[str]:
    # ';' inside quoted literals or backticked identifiers does not end a statement.
    buf: List[str] = []
    quote = None
    escape = False

    for ch in sql:
        buf.append(ch)
        if escape:
            escape = False
        elif ch == "\\" and quote in ("'", '"'):
            escape = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
        elif ch == ";":
            buf.pop()
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(config: DBConfig) -> None:
    conn = mysql.connector.connect(host=config.host, port=config.port, user=config.user, password=config.password)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_sql_file(config: DBConfig, path: str | Path) -> int:
    """Execute every statement of ``path`` against ``config.database``; returns the statement count."""
    sql = strip_database_statements(Path(path).read_text(encoding="utf-8"))
    conn = mysql.connector.connect(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        database=config.database,
    )
    count = 0
    try:
        cur = conn.cursor()
        for stmt in split_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()

    logger.info("Applied %d statements from %s to %s", count, path, config.database)
    return count


def list_tables(config: DBConfig) -> List[str]:
    conn = mysql.connector.connect(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        database=config.database,
    )
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in cur.fetchall()]
    finally:
        conn.close()
