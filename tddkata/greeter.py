"""Greeting writer and an HTTP greeter."""

from __future__ import annotations

import io
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TextIO


def greet(writer: TextIO, name: str) -> None:
    writer.write(f"Hello, {name}")


class GreeterHandler(BaseHTTPRequestHandler):
    """Answers GET requests with a greeting to the world."""

    def do_GET(self) -> None:
        text = io.StringIO()
        greet(text, "world")
        body = text.getvalue().encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def main(argv=None) -> int:
    """Serve greetings on port 5001."""
    with ThreadingHTTPServer(("", 5001), GreeterHandler) as server:
        server.serve_forever()
    return 0