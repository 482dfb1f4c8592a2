"""A game of Texas Hold'em with rising blinds."""

from __future__ import annotations

from datetime import timedelta
from typing import TextIO

from tddkata.poker.alerts import BlindAlerter
from tddkata.poker.league import PlayerStore

BLINDS = (100, 200, 300, 400, 500, 600, 800, 1000, 2000, 4000, 8000)


class TexasHoldem:
    """Schedules blind alerts and records the winner."""

    def __init__(self, alerter: BlindAlerter, store: PlayerStore) -> None:
        self._alerter = alerter
        self._store = store

    def start(self, number_of_players: int, alerts_destination: TextIO) -> None:
        """Schedule the blinds; more players means longer between rises."""
        increment = timedelta(minutes=5 + number_of_players)
        for step, blind in enumerate(BLINDS):
            self._alerter.schedule_alert_at(increment * step, blind, alerts_destination)

    def finish(self, winner: str) -> None:
        """Record a win for ``winner``."""
        self._store.record_win(winner)