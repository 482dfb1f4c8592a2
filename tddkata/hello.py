"""Greetings in a few languages."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_PREFIXES = {
    "Spanish": "Hola, ",
    "French": "Bonjour, ",
}
_ENGLISH_PREFIX = "Hello, "


def hello(name: str = "", language: str = "") -> str:
    """Greet ``name`` in ``language``; English and "World" are the defaults."""
    return _PREFIXES.get(language, _ENGLISH_PREFIX) + (name or "World")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting."""
    parser = argparse.ArgumentParser(description="Print a greeting.")
    parser.add_argument("name", nargs="?", default="Chris")
    parser.add_argument("language", nargs="?", default="English")
    args = parser.parse_args(argv)
    print(hello(args.name, args.language))
    return 0