"""A command-line front end that runs a game of poker."""

from __future__ import annotations

import re
from typing import TextIO

from tddkata.poker.league import Game

PLAYER_PROMPT = "Please enter the number of players: "
BAD_PLAYER_INPUT_ERR_MSG = (
    "Bad value received for number of players, please try again with a number"
)
BAD_WINNER_INPUT_MSG = "invalid winner input, expect format of 'PlayerName wins'"

_WINS_SUFFIX = " wins"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def extract_winner(user_input: str) -> str:
    """Return the name from input of the form "<name> wins".

    Raise ValueError if the input does not declare a winner.
    """
    if _WINS_SUFFIX not in user_input:
        raise ValueError(BAD_WINNER_INPUT_MSG)
    return user_input.replace(_WINS_SUFFIX, "", 1)


class CLI:
    """Asks for the number of players, starts the game and records the winner."""

    def __init__(self, stdin: TextIO, out: TextIO, game: Game) -> None:
        self._in = stdin
        self._out = out
        self._game = game

    def _write(self, text: str) -> None:
        self._out.write(text)
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()

    def _read_line(self) -> str:
        return self._in.readline().removesuffix("\n").removesuffix("\r")

    def play_poker(self) -> None:
        """Run one game, reporting bad input on the output instead of raising."""
        self._write(PLAYER_PROMPT)

        number_of_players = _parse_int(self._read_line())
        if number_of_players is None:
            self._write(BAD_PLAYER_INPUT_ERR_MSG)
            return

        self._game.start(number_of_players, self._out)

        try:
            winner = extract_winner(self._read_line())
        except ValueError:
            self._write(BAD_WINNER_INPUT_MSG)
            return

        self._game.finish(winner)