"""A player store kept as JSON in a file."""

from __future__ import annotations

import json
import os
from types import TracebackType
from typing import TextIO

from tddkata.poker.league import League, Player, new_league
from tddkata.poker.tape import Tape


class PlayerStoreError(Exception):
    """Raised when a player store cannot be opened or loaded."""


def _file_name(file: TextIO) -> str:
    return str(getattr(file, "name", "<file>"))


def _initialise_player_db_file(file: TextIO) -> None:
    try:
        size = file.seek(0, os.SEEK_END)
    except OSError as error:
        raise PlayerStoreError(
            f"problem getting file info from file {_file_name(file)}, {error}"
        ) from error
    if size == 0:
        file.write("[]")
        file.flush()
    file.seek(0)


def _encode_league(league: League) -> str:
    players = [{"Name": player.name, "Wins": player.wins} for player in league]
    return json.dumps(players, separators=(",", ":")) + "\n"


class FileSystemPlayerStore:
    """Keeps the league in memory and writes it to ``file`` after each win."""

    def __init__(self, file: TextIO) -> None:
        try:
            _initialise_player_db_file(file)
        except PlayerStoreError as error:
            raise PlayerStoreError(f"problem initialising player db file, {error}") from error
        try:
            league = new_league(file)
        except ValueError as error:
            raise PlayerStoreError(
                f"problem loading player store from file {_file_name(file)}, {error}"
            ) from error
        self._file = file
        self._database = Tape(file)
        self._league = league

    def get_league(self) -> League:
        """Return the league, best players first."""
        self._league.sort(key=lambda player: player.wins, reverse=True)
        return self._league

    def get_player_score(self, name: str) -> int:
        """Return the wins of ``name``, or 0 for an unknown player."""
        player = self._league.find(name)
        return player.wins if player is not None else 0

    def record_win(self, name: str) -> None:
        """Add a win for ``name`` and save the league."""
        player = self._league.find(name)
        if player is not None:
            player.wins += 1
        else:
            self._league.append(Player(name, 1))
        self._database.write(_encode_league(self._league))
        self._file.flush()

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> FileSystemPlayerStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def player_store_from_file(path: str | os.PathLike[str]) -> FileSystemPlayerStore:
    """Open (creating if needed) the JSON file at ``path`` as a player store.

    The returned store owns the file; close it, or use it as a context manager.
    """
    try:
        descriptor = os.open(path, os.O_RDWR | os.O_CREAT, 0o666)
        file = os.fdopen(descriptor, "r+", encoding="utf-8")
    except OSError as error:
        raise PlayerStoreError(f"problem opening {os.fspath(path)} {error}") from error
    try:
        return FileSystemPlayerStore(file)
    except PlayerStoreError as error:
        file.close()
        raise PlayerStoreError(
            f"problem creating file system player store, {error}"
        ) from error