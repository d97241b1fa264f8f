from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # schema.sql holds only DDL without string literals, so ';' always ends a statement.
    sql = re.sub(r"(?m)^\s*--.*$", "", sql)
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: Path) -> int:
    """Run every statement of ``schema_path`` (idempotent: CREATE IF NOT EXISTS)."""
    statements = list(_iter_sql_statements(schema_path.read_text(encoding="utf-8")))
    with db_cursor(conn_factory) as (_, cur):
        for stmt in statements:
            cur.execute(stmt)
    logger.info("Applied %d schema statements from %s", len(statements), schema_path)
    return len(statements)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in fetchall(cur)]
