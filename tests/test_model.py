import json

import pytest

from hxsg.database import DatabaseError, NotFoundError
from hxsg.goods import AddOutcome
from hxsg.model import Model


@pytest.fixture
def model(tmp_path):
    m = Model(tmp_path / "data")
    m.init()
    return m


def test_init_creates_directory(tmp_path):
    m = Model(tmp_path / "nested" / "data")
    m.init()
    assert (tmp_path / "nested" / "data").is_dir()


def test_msg_add_before_init_fails(tmp_path):
    m = Model(tmp_path)
    with pytest.raises(DatabaseError):
        m.msg_add(1000, "system", "hello", 3)


def test_msg_round_trip(model):
    model.msg_add(1000, "system", "hello world", 3)
    rows = json.loads(model.msg_get_by_type(3))
    assert len(rows) == 1
    assert rows[0]["content"] == "hello world"
    assert rows[0]["user_name"] == "system"
    assert rows[0]["user_id"] == "1000"


def test_msg_get_by_type_filters(model):
    model.msg_add(1, "a", "first", 1)
    model.msg_add(2, "b", "second", 2)
    rows = json.loads(model.msg_get_by_type(2))
    assert [row["content"] for row in rows] == ["second"]


def test_msg_get_by_type_empty(model):
    with pytest.raises(NotFoundError):
        model.msg_get_by_type(9)


def test_msg_get_by_type_keeps_at_most_six(model):
    for index in range(8):
        model.msg_add(1, "a", f"m{index}", 3)
    assert len(json.loads(model.msg_get_by_type(3))) == 6


def test_user_goods_add_bygid_insert_then_update(model):
    assert model.user_goods_add_bygid(9, 5, 3) is AddOutcome.INSERTED
    assert model.user_goods_add_bygid(9, 5, 4) is AddOutcome.UPDATED
    assert model.user_goods_col_val(9, 5, "counts") == 3 + 4


def test_user_goods_add_bygid_zero_is_unknown(model):
    assert model.user_goods_add_bygid(9, 0, 3) is AddOutcome.UNKNOWN_GOODS


def test_user_goods_add_by_name(model):
    gid = model.goods.insert_goods("silver", "buys things", "baowu", 1, 1)
    assert model.user_goods_add(4, "silver", 2) is AddOutcome.INSERTED
    assert model.user_goods_col_val(4, gid, "counts") == 2


def test_user_goods_add_unknown_name(model):
    assert model.user_goods_add(4, "missing", 2) is AddOutcome.UNKNOWN_GOODS


def test_user_goods_list(model):
    model.user_goods_add_bygid(9, 1, 1)
    model.user_goods_add_bygid(9, 2, 5)
    rows = json.loads(model.user_goods_list(9))
    assert rows == [{"goods_id": "1", "counts": "1"}, {"goods_id": "2", "counts": "5"}]


def test_user_goods_list_empty(model):
    with pytest.raises(NotFoundError):
        model.user_goods_list(9)


def test_col_val_missing_row(model):
    with pytest.raises(NotFoundError):
        model.user_goods_col_val(1, 1, "id")