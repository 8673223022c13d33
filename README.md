# hxsg

A small game backend. It keeps a goods catalogue, per-player inventories
and messages in SQLite databases, answers form-encoded requests about
inventories over HTTP and streams data over a WebSocket.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running the server

```
hxsg [--host HOST] [--port PORT] [--data-dir DIR]
```

The defaults are `localhost`, port `8080` and the data directory `./data`.
On start the data directory and any missing tables are created. The data
directory holds three files: `msg.db` for messages, `goods.db` for the
goods catalogue and `user_goods.db` for inventories.

The server has two routes.

### `/hxsg/api/user_mgr`

Takes form fields; the `action` field picks the operation.

- `action=addUserGoods` with `user_id`, `goods_id` and `counts`: adds
  `counts` of the item to the player's inventory. The reply is a plain
  text body: `0` when an existing inventory row was updated, `1` when a
  new row was inserted, the item id was `0` or the database failed, and
  `2` when one of the fields is missing.
- `action=getUserGoodsList` with `user_id`: replies with a JSON envelope
  holding the player's goods ids and counts, for example

  ```json
  {"code":200,"data":[{"goods_id":"1","counts":"5"}],"msg":""}
  ```

  and with the plain body `1` when the player has no goods. Every value
  in `data` is a string.

Any other action gets an empty body.

### `/ws`

A WebSocket that sends the text frame `Some random integer: N` once a
second until the client closes the connection. A request that is not a
WebSocket upgrade gets a 400.

## Using the library

The storage layer can be used on its own. Failures raise
`hxsg.database.DatabaseError`; queries that must return rows and return
none raise its subclass `NotFoundError`.

```python
from hxsg.messages import MessageStore

store = MessageStore("msg.db")
store.create_table()
store.add(1000, "system", "hello", 3)
print(store.latest_by_type(3, 6))  # newest six messages of type 3, as JSON
```

```python
from hxsg.goods import AddOutcome, GoodsStore

goods = GoodsStore("goods.db", "user_goods.db")
goods.create_tables()
goods.insert_goods("silver", "used to buy items", "baowu", 1, 1)
assert goods.add_by_name(1, "silver", 10) is AddOutcome.INSERTED
assert goods.add_by_name(1, "silver", 5) is AddOutcome.UPDATED
print(goods.list_for_user(1))
```

`GoodsStore` also has `goods_id`, `column_for`, `add_by_id`,
`set_counts` and `delete`.

`hxsg.model.Model` wraps both stores under one data directory; `init()`
creates the directory and the tables. The handlers in `hxsg.handlers`
(`user_mgr` and `msg_mgr`) take a `Model` and a mapping of form fields
and return a `Response` with body, MIME type and status; `envelope`
builds the `{"code":..,"data":..,"msg":".."}` reply. `msg_mgr` handles
`msg_add` (with `user_id`, `user_name`, `content` and `type`) and
`msg_get_by_type` (with `type`), replying `200` on success, `201` when
the operation failed and `202` when a parameter is missing.
`hxsg.server.create_app` builds the aiohttp application from a `Model`.

`hxsg.files` has `read_text_file` and `StaticFile`, which reads a file
into memory once and serves it with a fixed MIME type, or a 404 when the
file was missing or empty.

## What it does not do

- There are no player accounts: no registration, no login, no player
  profile or attributes. Inventories and messages are keyed by a numeric
  user id that the caller supplies, and nothing checks it.
- The message handler `msg_mgr` is not served by the server; messages can
  only be stored and read through the library.
- `StaticFile` is not mounted on any route; the server serves no files.
- The goods catalogue has no HTTP interface; it is filled through
  `GoodsStore.insert_goods`.