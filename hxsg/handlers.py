"""Request handlers of the game API."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from http import HTTPStatus
from typing import Mapping, Optional, Union

from .database import DatabaseError
from .goods import AddOutcome

log = logging.getLogger(__name__)

DEFAULT_MIME = "text/html;charset=utf-8"
_EMPTY_DATA = '""'
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Response:
    """A handler's answer: body, MIME type and HTTP status."""

    body: Union[str, bytes] = ""
    mime_type: str = DEFAULT_MIME
    status: HTTPStatus = HTTPStatus.OK


def envelope(code, data: str, msg: str) -> str:
    """Wrap raw JSON *data* in the API's code/data/msg object."""
    return f'{{"code":{code},"data":{data},"msg":"{msg}"}}'


def _atoi(text: Optional[str]) -> int:
    """Parse a leading integer, yielding 0 when there is none."""
    if text is None:
        return 0
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def msg_mgr(model, params: Mapping[str, str]) -> Response:
    """Handle the message API: ``msg_add`` and ``msg_get_by_type``."""
    action = params.get("action")
    if action == "msg_add":
        content = params.get("content")
        user_name = params.get("user_name")
        user_id = params.get("user_id")
        kind = params.get("type")
        if None in (content, user_name, user_id, kind):
            return Response(envelope(202, _EMPTY_DATA, "err: params can not be null"))
        try:
            model.msg_add(_atoi(user_id), user_name, content, _atoi(kind))
        except DatabaseError as exc:
            log.warning("msg_add failed: %s", exc)
            return Response(envelope(201, _EMPTY_DATA, "add err"))
        return Response(envelope(200, _EMPTY_DATA, "ok"))
    if action == "msg_get_by_type":
        try:
            data = model.msg_get_by_type(_atoi(params.get("type")))
        except DatabaseError as exc:
            log.info("msg_get_by_type: %s", exc)
            return Response(envelope(201, _EMPTY_DATA, "get err"))
        return Response(envelope(200, data, ""))
    return Response("")


def user_mgr(model, params: Mapping[str, str]) -> Response:
    """Handle the user inventory API: ``addUserGoods`` and ``getUserGoodsList``."""
    action = params.get("action")
    if action == "addUserGoods":
        goods_id = params.get("goods_id")
        user_id = params.get("user_id")
        counts = params.get("counts")
        if None in (goods_id, user_id, counts):
            return Response("2")
        try:
            outcome = model.user_goods_add_bygid(
                _atoi(user_id), _atoi(goods_id), _atoi(counts)
            )
        except DatabaseError as exc:
            log.warning("addUserGoods failed: %s", exc)
            return Response("1")
        log.debug("addUserGoods outcome = %s", outcome)
        return Response("0" if outcome == AddOutcome.UPDATED else "1")
    if action == "getUserGoodsList":
        try:
            data = model.user_goods_list(_atoi(params.get("user_id")))
        except DatabaseError as exc:
            log.info("getUserGoodsList: %s", exc)
            return Response("1")
        return Response(envelope(200, data, ""))
    return Response("")