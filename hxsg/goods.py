"""Goods catalogue and per-user inventory."""

from __future__ import annotations

from enum import IntEnum

from .database import NotFoundError, connect, rows_to_json

_CREATE_GOODS = (
    "create table if not exists goods("
    "id integer primary key autoincrement,"
    "name nchar NOT NULL,"
    "info nchar NOT NULL,"
    "type int DEFAULT 0,"
    "level int DEFAULT 0,"
    "price int DEFAULT 0,"
    "cansale int DEFAULT 0,"
    "state int DEFAULT 0,"
    "comment nchar DEFAULT 'comment');"
)

_CREATE_USER_GOODS = (
    "create table if not exists user_goods("
    "id integer primary key autoincrement,"
    "user_id int NOT NULL,"
    "goods_id int NOT NULL,"
    "counts int DEFAULT 0);"
)

_USER_GOODS_COLUMNS = frozenset({"id", "user_id", "goods_id", "counts"})


class AddOutcome(IntEnum):
    """What adding goods to a user's inventory did."""

    UPDATED = 0
    UNKNOWN_GOODS = 1
    INSERTED = 2


class GoodsStore:
    """The ``goods`` catalogue and the ``user_goods`` inventory table."""

    def __init__(self, goods_path, user_goods_path):
        self.goods_path = goods_path
        self.user_goods_path = user_goods_path

    def create_tables(self) -> None:
        """Create both tables if they do not exist yet."""
        with connect(self.goods_path) as conn:
            conn.execute(_CREATE_GOODS)
        with connect(self.user_goods_path) as conn:
            conn.execute(_CREATE_USER_GOODS)

    def insert_goods(self, name: str, info: str, kind, level: int, price: int) -> int:
        """Add an item to the catalogue and return its id."""
        with connect(self.goods_path) as conn:
            cursor = conn.execute(
                "insert into goods (name,info,type,level,price) values (?,?,?,?,?)",
                (name, info, kind, level, price),
            )
            return cursor.lastrowid

    def goods_id(self, name: str) -> int:
        """Return the catalogue id of the item called *name*."""
        with connect(self.goods_path) as conn:
            row = conn.execute("select id from goods where name=?", (name,)).fetchone()
        if row is None:
            raise NotFoundError(f"no goods named {name!r}")
        return int(row[0])

    def column_for(self, user_id: int, goods_id: int, column: str) -> int:
        """Return *column* of the inventory row for this user and item."""
        if column not in _USER_GOODS_COLUMNS:
            raise ValueError(f"unknown user_goods column: {column!r}")
        with connect(self.user_goods_path) as conn:
            row = conn.execute(
                f"select {column} from user_goods where user_id=? and goods_id=?",
                (user_id, goods_id),
            ).fetchone()
        if row is None:
            raise NotFoundError(f"user {user_id} has no goods {goods_id}")
        return int(row[0] or 0)

    def add_by_name(self, user_id: int, name: str, counts: int) -> AddOutcome:
        """Add *counts* of the item called *name* to a user's inventory."""
        try:
            goods_id = self.goods_id(name)
        except NotFoundError:
            return AddOutcome.UNKNOWN_GOODS
        return self.add_by_id(user_id, goods_id, counts)

    def add_by_id(self, user_id: int, goods_id: int, counts: int) -> AddOutcome:
        """Add *counts* of item *goods_id* to a user's inventory."""
        if not goods_id:
            return AddOutcome.UNKNOWN_GOODS
        try:
            row_id = self.column_for(user_id, goods_id, "id")
        except NotFoundError:
            with connect(self.user_goods_path) as conn:
                conn.execute(
                    "insert into user_goods (user_id,goods_id,counts) values (?,?,?)",
                    (user_id, goods_id, counts),
                )
            return AddOutcome.INSERTED
        current = self.column_for(user_id, goods_id, "counts")
        self.set_counts(row_id, current + counts)
        return AddOutcome.UPDATED

    def set_counts(self, user_goods_id: int, counts: int) -> None:
        """Set the count of one inventory row."""
        with connect(self.user_goods_path) as conn:
            conn.execute(
                "update user_goods set counts=? where id=?", (counts, user_goods_id)
            )

    def list_for_user(self, user_id: int) -> str:
        """Return a user's goods ids and counts as a JSON array."""
        with connect(self.user_goods_path) as conn:
            cursor = conn.execute(
                "select goods_id,counts from user_goods where user_id=?", (user_id,)
            )
            result = rows_to_json(cursor)
        if result is None:
            raise NotFoundError(f"user {user_id} has no goods")
        return result

    def delete(self, user_goods_id: int) -> None:
        """Remove one inventory row."""
        with connect(self.user_goods_path) as conn:
            conn.execute("delete from user_goods where id=?", (user_goods_id,))