"""Entry points for the poker command line game and web server."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from aiohttp import web

from tddkata.poker.alerts import BlindAlerterFunc, alerter
from tddkata.poker.cli import CLI
from tddkata.poker.file_store import PlayerStoreError, player_store_from_file
from tddkata.poker.server import HTML_TEMPLATE_PATH, PlayerServer
from tddkata.poker.texas_holdem import TexasHoldem

DB_FILE_NAME = "game.db.json"
DEFAULT_PORT = 5001


def cli_main(argv: Sequence[str] | None = None) -> int:
    """Play one game of poker on standard input and output."""
    parser = argparse.ArgumentParser(description="Play a game of poker.")
    parser.add_argument("--db", default=DB_FILE_NAME, help="player database file")
    args = parser.parse_args(argv)

    try:
        store = player_store_from_file(args.db)
    except PlayerStoreError as error:
        print(error, file=sys.stderr)
        return 1

    with store:
        game = TexasHoldem(BlindAlerterFunc(alerter), store)
        cli = CLI(sys.stdin, sys.stdout, game)
        print("Let's play poker")
        print("Type {Name} wins to record a win")
        cli.play_poker()
    return 0


def webserver_main(argv: Sequence[str] | None = None) -> int:
    """Serve the poker web application until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the poker web application.")
    parser.add_argument("--db", default=DB_FILE_NAME, help="player database file")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--template", default=HTML_TEMPLATE_PATH, help="game page")
    args = parser.parse_args(argv)

    try:
        store = player_store_from_file(args.db)
    except PlayerStoreError as error:
        print(error, file=sys.stderr)
        return 1

    with store:
        game = TexasHoldem(BlindAlerterFunc(alerter), store)
        try:
            server = PlayerServer(store, game, args.template)
        except OSError as error:
            print(f"problem creating player server {error}", file=sys.stderr)
            return 1
        web.run_app(server.app, port=args.port)
    return 0