"""A player store kept in memory."""

from __future__ import annotations

import threading
from collections import Counter

from tddkata.poker.league import League, Player


class InMemoryPlayerStore:
    """Counts wins per player in a thread-safe way."""

    def __init__(self) -> None:
        self._store: Counter[str] = Counter()
        self._lock = threading.Lock()

    def record_win(self, name: str) -> None:
        """Add a win for ``name``."""
        with self._lock:
            self._store[name] += 1

    def get_player_score(self, name: str) -> int:
        """Return the wins of ``name``, 0 if unknown."""
        with self._lock:
            return self._store[name]

    def get_league(self) -> League:
        """Return every known player with their wins."""
        with self._lock:
            return League(Player(name, wins) for name, wins in self._store.items())