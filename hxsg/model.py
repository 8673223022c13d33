"""Facade over the message and goods stores kept in one data directory."""

from __future__ import annotations

from pathlib import Path

from .goods import AddOutcome, GoodsStore
from .messages import MessageStore

DEFAULT_DATA_DIR = "./data"


class Model:
    """All game data kept as SQLite files under *data_dir*."""

    def __init__(self, data_dir=DEFAULT_DATA_DIR):
        self.data_dir = Path(data_dir)
        self.messages = MessageStore(self.data_dir / "msg.db")
        self.goods = GoodsStore(
            self.data_dir / "goods.db", self.data_dir / "user_goods.db"
        )

    def init(self) -> None:
        """Create the data directory and every table that is missing."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.messages.create_table()
        self.goods.create_tables()

    def msg_add(self, user_id: int, name: str, content: str, kind: int) -> None:
        """Store a message; raises :class:`DatabaseError` on failure."""
        self.messages.add(user_id, name, content, kind)

    def msg_get_by_type(self, kind: int) -> str:
        """Return the latest messages of type *kind* as a JSON array."""
        return self.messages.latest_by_type(kind)

    def user_goods_add(self, user_id: int, goods_name: str, counts: int) -> AddOutcome:
        """Add *counts* of the item called *goods_name* to a user's inventory."""
        return self.goods.add_by_name(user_id, goods_name, counts)

    def user_goods_add_bygid(self, user_id: int, gid: int, counts: int) -> AddOutcome:
        """Add *counts* of item *gid* to a user's inventory."""
        return self.goods.add_by_id(user_id, gid, counts)

    def user_goods_list(self, user_id: int) -> str:
        """Return a user's inventory as a JSON array."""
        return self.goods.list_for_user(user_id)

    def user_goods_col_val(self, user_id: int, goods_id: int, column: str) -> int:
        """Return one column of the inventory row for this user and item."""
        return self.goods.column_for(user_id, goods_id, column)