"""An HTTP handler serving what a store fetches."""

from __future__ import annotations

from typing import Protocol

from aiohttp import web


class Store(Protocol):
    async def fetch(self) -> str: ...


def fetch_handler(store: Store):
    """Return a handler answering with the store's data, or empty on failure."""

    async def handler(request: web.Request) -> web.Response:
        try:
            data = await store.fetch()
        except Exception:
            return web.Response(text="")
        return web.Response(text=data)

    return handler