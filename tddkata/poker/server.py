"""An HTTP and websocket server for recording and showing poker results."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import re
from pathlib import Path

from aiohttp import WSMsgType, web

from tddkata.poker.league import Game, League, PlayerStore

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
HTML_TEMPLATE_PATH = "game.html"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int_or_zero(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _encode_league(league: League) -> bytes:
    players = [{"Name": player.name, "Wins": player.wins} for player in league]
    return (json.dumps(players, separators=(",", ":")) + "\n").encode("utf-8")


class WebSocketWriter:
    """A text writer that sends each write as a websocket text message.

    Writes may come from the event loop's thread or from any other thread.
    """

    def __init__(self, ws: web.WebSocketResponse, loop: asyncio.AbstractEventLoop) -> None:
        self._ws = ws
        self._loop = loop
        self._pending: set[asyncio.Task[None]] = set()

    def _on_loop_thread(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    def _finished(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning("problem writing to websocket %s", task.exception())

    def write(self, data: str | bytes) -> int:
        """Send ``data`` as one text message and return its length."""
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        if self._on_loop_thread():
            task = self._loop.create_task(self._ws.send_str(text))
            self._pending.add(task)
            task.add_done_callback(self._finished)
            return len(data)
        try:
            asyncio.run_coroutine_threadsafe(self._ws.send_str(text), self._loop).result()
        except Exception as error:
            raise OSError(f"problem writing to websocket {error}") from error
        return len(data)

    async def wait_for_message(self) -> str:
        """Return the next message, or '' if the connection failed or closed."""
        try:
            message = await self._ws.receive()
        except RuntimeError as error:
            logger.warning("error reading from websocket %s", error)
            return ""
        if message.type == WSMsgType.TEXT:
            return message.data
        if message.type == WSMsgType.BINARY:
            return message.data.decode("utf-8", errors="replace")
        logger.warning("error reading from websocket %s", message)
        return ""

    async def _drain(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


class PlayerServer:
    """Serves scores, the league, the game page and the game websocket.

    ``app`` is the aiohttp application to run. The game page is read from
    ``template_path`` when the server is made; OSError is raised if it cannot be.
    """

    def __init__(
        self,
        store: PlayerStore,
        game: Game,
        template_path: str | os.PathLike[str] = HTML_TEMPLATE_PATH,
    ) -> None:
        self._page = Path(template_path).read_text(encoding="utf-8")
        self._store = store
        self._game = game

        app = web.Application()
        app.router.add_route("*", "/league", self._league_handler)
        app.router.add_route("*", "/players/{name:.*}", self._players_handler)
        app.router.add_route("*", "/game", self._play_game)
        app.router.add_get("/ws", self._web_socket)
        self.app = app

    async def _web_socket(self, request: web.Request) -> web.StreamResponse:
        ws = web.WebSocketResponse()
        await ws.prepare(request)
        writer = WebSocketWriter(ws, asyncio.get_running_loop())

        number_of_players = _parse_int_or_zero(await writer.wait_for_message())
        self._game.start(number_of_players, writer)

        winner = await writer.wait_for_message()
        self._game.finish(winner)

        await writer._drain()
        return ws

    async def _play_game(self, request: web.Request) -> web.StreamResponse:
        return web.Response(text=self._page, content_type="text/html")

    async def _league_handler(self, request: web.Request) -> web.StreamResponse:
        return web.Response(
            body=_encode_league(self._store.get_league()),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    async def _players_handler(self, request: web.Request) -> web.StreamResponse:
        player = request.match_info["name"]
        if request.method == "POST":
            self._store.record_win(player)
            return web.Response(status=202)
        if request.method == "GET":
            score = self._store.get_player_score(player)
            return web.Response(status=404 if score == 0 else 200, text=str(score))
        return web.Response()