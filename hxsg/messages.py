"""Storage of chat and system messages."""

from __future__ import annotations

from .database import NotFoundError, connect, rows_to_json

_CREATE_MSG = (
    "create table if not exists msg("
    "id integer primary key autoincrement,"
    "user_id int NOT NULL,"
    "user_name nchar NOT NULL,"
    "timestamp TIMESTAMP default (datetime('now', 'localtime')),"
    "content nchar NOT NULL,"
    "type int DEFAULT 0);"
)


class MessageStore:
    """Messages kept in the ``msg`` table of one SQLite file."""

    def __init__(self, path):
        self.path = path

    def create_table(self) -> None:
        """Create the ``msg`` table if it does not exist yet."""
        with connect(self.path) as conn:
            conn.execute(_CREATE_MSG)

    def add(self, user_id: int, user_name: str, content: str, kind: int) -> None:
        """Store one message of type *kind*."""
        with connect(self.path) as conn:
            conn.execute(
                "insert into msg (user_id,user_name,content,type) values (?,?,?,?)",
                (user_id, user_name, content, kind),
            )

    def latest_by_type(self, kind: int, limit: int = 6) -> str:
        """Return the newest messages of type *kind* as a JSON array.

        Raises :class:`NotFoundError` when there are none.
        """
        with connect(self.path) as conn:
            cursor = conn.execute(
                "select * from msg where type=? ORDER BY timestamp desc limit ?",
                (kind, limit),
            )
            result = rows_to_json(cursor)
        if result is None:
            raise NotFoundError(f"no messages of type {kind}")
        return result