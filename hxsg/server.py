"""HTTP and WebSocket server of the game."""

from __future__ import annotations

import argparse
import asyncio
import random

from aiohttp import WSMsgType, web

from .handlers import user_mgr
from .model import DEFAULT_DATA_DIR, Model

_RAND_MAX = 2**31 - 1
_WS_INTERVAL = 1.0
_CLOSING = (WSMsgType.CLOSE, WSMsgType.CLOSING, WSMsgType.CLOSED, WSMsgType.ERROR)


async def ws_handler(request: web.Request) -> web.StreamResponse:
    """Send a random integer over the WebSocket once a second."""
    ws = web.WebSocketResponse()
    if not ws.can_prepare(request).ok:
        return web.Response(status=400)
    await ws.prepare(request)
    while not ws.closed:
        try:
            await ws.send_str(f"Some random integer: {random.randint(0, _RAND_MAX)}")
        except ConnectionResetError:
            break
        try:
            msg = await ws.receive(timeout=_WS_INTERVAL)
        except asyncio.TimeoutError:
            continue
        if msg.type in _CLOSING:
            break
    return ws


def create_app(model: Model) -> web.Application:
    """Build the web application serving *model*."""

    async def user_mgr_route(request: web.Request) -> web.Response:
        form = await request.post()
        params = {key: value for key, value in form.items() if isinstance(value, str)}
        result = await asyncio.to_thread(user_mgr, model, params)
        body = result.body.encode("utf-8") if isinstance(result.body, str) else result.body
        return web.Response(
            body=body,
            status=int(result.status),
            headers={"Content-Type": result.mime_type},
        )

    app = web.Application()
    app.router.add_get("/ws", ws_handler)
    app.router.add_route("*", "/hxsg/api/user_mgr{tail:.*}", user_mgr_route)
    return app


def main(argv=None) -> None:
    """Run the server."""
    parser = argparse.ArgumentParser(prog="hxsg", description="Game API server.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--data-dir", default=DEFAULT_DATA_DIR)
    args = parser.parse_args(argv)
    model = Model(args.data_dir)
    model.init()
    web.run_app(create_app(model), host=args.host, port=args.port)


if __name__ == "__main__":
    main()