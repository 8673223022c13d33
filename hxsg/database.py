"""SQLite access helpers shared by the stores."""

from __future__ import annotations

import json
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator


class DatabaseError(Exception):
    """A database could not be opened or a statement failed."""


class NotFoundError(DatabaseError):
    """A query that had to produce data produced none."""


@contextmanager
def connect(path) -> Iterator[sqlite3.Connection]:
    """Open the database at *path* for one unit of work.

    The work is committed when the block ends normally and rolled back when
    it raises.  SQLite errors surface as :class:`DatabaseError`.
    """
    try:
        conn = sqlite3.connect(os.fspath(path))
    except sqlite3.Error as exc:
        raise DatabaseError(f"can't open database {path}: {exc}") from exc
    try:
        with conn:
            yield conn
    except sqlite3.Error as exc:
        raise DatabaseError(f"SQL error: {exc}") from exc
    finally:
        conn.close()


def _as_text(value):
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def rows_to_json(cursor) -> str | None:
    """Render the rows of *cursor* as a compact JSON array of objects.

    Every value is rendered as a string, NULL as ``null``.  Returns ``None``
    when the cursor yields no rows.
    """
    if cursor.description is None:
        return None
    names = [column[0] for column in cursor.description]
    rows = [dict(zip(names, map(_as_text, row))) for row in cursor]
    if not rows:
        return None
    return json.dumps(rows, ensure_ascii=False, separators=(",", ":"))