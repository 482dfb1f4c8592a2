"""Stand-in stores and alerters for exercising games and servers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import TextIO

from tddkata.poker.league import League, Player


@dataclass
class StubPlayerStore:
    """A store with fixed scores and league that records wins it is given."""

    scores: dict[str, int] = field(default_factory=dict)
    win_calls: list[str] = field(default_factory=list)
    league: list[Player] = field(default_factory=list)

    def get_player_score(self, name: str) -> int:
        """Return the fixed score of ``name``, 0 if unknown."""
        return self.scores.get(name, 0)

    def record_win(self, name: str) -> None:
        """Remember that a win was recorded for ``name``."""
        self.win_calls.append(name)

    def get_league(self) -> League:
        """Return the fixed league."""
        return League(self.league)


def assert_player_win(store: StubPlayerStore, winner: str) -> None:
    """Check that exactly one win was recorded, and for ``winner``."""
    if len(store.win_calls) != 1:
        raise AssertionError(f"got {len(store.win_calls)} calls to record_win want 1")
    if store.win_calls[0] != winner:
        raise AssertionError(
            f"did not store correct winner got {store.win_calls[0]!r} want {winner!r}"
        )


def _format_duration(duration: timedelta) -> str:
    microseconds = duration // timedelta(microseconds=1)
    if microseconds == 0:
        return "0s"
    sign = "-" if microseconds < 0 else ""
    microseconds = abs(microseconds)
    if microseconds < 1000:
        return f"{sign}{microseconds}µs"
    if microseconds < 1_000_000:
        millis = f"{microseconds / 1000:f}".rstrip("0").rstrip(".")
        return f"{sign}{millis}ms"
    total_seconds, fraction = divmod(microseconds, 1_000_000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    seconds_text = str(seconds)
    if fraction:
        seconds_text += f".{fraction:06d}".rstrip("0")
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if hours or minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds_text}s")
    return sign + "".join(parts)


@dataclass(frozen=True)
class ScheduledAlert:
    """When an alert is due and for which blind amount."""

    at: timedelta
    amount: int

    def __str__(self) -> str:
        return f"{self.amount} chips at {_format_duration(self.at)}"


@dataclass
class SpyBlindAlerter:
    """Records every alert it is asked to schedule."""

    alerts: list[ScheduledAlert] = field(default_factory=list)

    def schedule_alert_at(self, at: timedelta, amount: int, to: TextIO) -> None:
        self.alerts.append(ScheduledAlert(at, amount))