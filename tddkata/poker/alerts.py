"""Scheduling of blind alerts."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol, TextIO


class BlindAlerter(Protocol):
    """Schedules alerts for blind amounts."""

    def schedule_alert_at(self, duration: timedelta, amount: int, to: TextIO) -> None: ...


@dataclass(frozen=True)
class BlindAlerterFunc:
    """Turns a plain function into a BlindAlerter."""

    func: Callable[[timedelta, int, TextIO], object]

    def schedule_alert_at(self, duration: timedelta, amount: int, to: TextIO) -> None:
        self.func(duration, amount, to)


def alerter(duration: timedelta, amount: int, to: TextIO) -> threading.Timer:
    """Write "Blind is now <amount>" to ``to`` once ``duration`` has passed."""

    def announce() -> None:
        to.write(f"Blind is now {amount}\n")
        flush = getattr(to, "flush", None)
        if flush is not None:
            flush()

    timer = threading.Timer(max(duration.total_seconds(), 0.0), announce)
    timer.daemon = True
    timer.start()
    return timer