import json

import pytest

from hxsg.database import DatabaseError, connect, rows_to_json


def _json_for(tmp_path, sql):
    with connect(tmp_path / "scratch.db") as conn:
        return rows_to_json(conn.execute(sql))


def test_object_with_string_values(tmp_path):
    result = _json_for(
        tmp_path, "select 'Harry' as name, 'student' as type, '123456' as id"
    )
    assert result == '[{"name":"Harry","type":"student","id":"123456"}]'


def test_integers_rendered_as_strings(tmp_path):
    result = _json_for(
        tmp_path, "select 1 as n union all select 2 union all select 3"
    )
    assert result == '[{"n":"1"},{"n":"2"},{"n":"3"}]'


def test_null_and_float_values(tmp_path):
    result = _json_for(tmp_path, "select null as a, 1.5 as b")
    assert json.loads(result) == [{"a": None, "b": "1.5"}]


def test_non_ascii_is_kept(tmp_path):
    result = _json_for(tmp_path, "select '银两' as name")
    assert result == '[{"name":"银两"}]'


def test_no_rows_gives_none(tmp_path):
    with connect(tmp_path / "t.db") as conn:
        conn.execute("create table t (x int)")
        assert rows_to_json(conn.execute("select * from t")) is None


def test_connect_creates_database_file(tmp_path):
    path = tmp_path / "test.db"
    with connect(path) as conn:
        conn.execute("create table t (x int)")
    assert path.exists()


def test_select_all_from_table(tmp_path):
    path = tmp_path / "user.db"
    with connect(path) as conn:
        conn.execute("create table user (id integer primary key, account nchar)")
        conn.execute("insert into user (account) values ('test')")
    with connect(path) as conn:
        result = rows_to_json(conn.execute("select * from user"))
    assert result == '[{"id":"1","account":"test"}]'


def test_connect_missing_directory_raises(tmp_path):
    with pytest.raises(DatabaseError):
        with connect(tmp_path / "missing" / "x.db"):
            pass


def test_sql_error_raises_database_error(tmp_path):
    with pytest.raises(DatabaseError):
        with connect(tmp_path / "x.db") as conn:
            conn.execute("select * from nowhere")


def test_failed_block_is_rolled_back(tmp_path):
    path = tmp_path / "x.db"
    with connect(path) as conn:
        conn.execute("create table t (x int)")
    with pytest.raises(ValueError):
        with connect(path) as conn:
            conn.execute("insert into t values (1)")
            raise ValueError("abort")
    with connect(path) as conn:
        assert conn.execute("select count(*) from t").fetchone()[0] == 0