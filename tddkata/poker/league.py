"""Players, leagues and the store and game interfaces."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Protocol, TextIO


@dataclass
class Player:
    name: str
    wins: int


class League(list):
    """A list of players searchable by name."""

    def find(self, name: str) -> Player | None:
        return next((player for player in self if player.name == name), None)


class PlayerStore(Protocol):
    def get_player_score(self, name: str) -> int: ...

    def record_win(self, name: str) -> None: ...

    def get_league(self) -> League: ...


class Game(Protocol):
    def start(self, number_of_players: int, alerts_destination: TextIO) -> None: ...

    def finish(self, winner: str) -> None: ...


def _player(entry: dict) -> Player:
    fields = {key.lower(): value for key, value in entry.items()}
    name, wins = fields.get("name", ""), fields.get("wins", 0)
    if not isinstance(name, str) or isinstance(wins, bool) or not isinstance(wins, int):
        raise TypeError(f"invalid player {entry!r}")
    return Player(name, wins)


def new_league(reader: TextIO) -> League:
    """Parse a JSON array of players; raise ValueError if it is invalid."""
    try:
        data = json.load(reader)
        return League(_player(entry) for entry in data or [])
    except (ValueError, TypeError, AttributeError) as error:
        raise ValueError(f"problem parsing league, {error}") from error