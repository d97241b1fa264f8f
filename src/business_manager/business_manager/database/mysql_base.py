from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import DataSourceError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def _release(action, what: str) -> None:
    # Cleanup on a dropped connection fails too; the original error is the one to report.
    try:
        action()
    except mysql.connector.Error as exc:
        logger.warning("Ignoring failed %s: %s", what, exc)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; driver errors surface as DataSourceError."""
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise DataSourceError(f"Cannot connect to database: {exc}") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            _release(cur.close, "cursor close")
    except mysql.connector.Error as exc:
        _release(conn.rollback, "rollback")
        raise DataSourceError(f"Database operation failed: {exc}") from exc
    except Exception:
        _release(conn.rollback, "rollback")
        raise
    finally:
        _release(conn.close, "connection close")


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values.

    mysql-connector returns TIME columns as ``datetime.timedelta``; documents
    imported from elsewhere may already hold ``datetime.time``.
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60, second=total_seconds % 60)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
