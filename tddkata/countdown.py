"""A countdown that pauses between numbers."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol, TextIO

FINAL_WORD = "Go!"
COUNTDOWN_START = 3


class Sleeper(Protocol):
    """Something that can pause."""

    def sleep(self) -> None: ...


@dataclass
class ConfigurableSleeper:
    """Pauses for ``duration`` seconds using ``pause``."""

    duration: float
    pause: Callable[[float], None]

    def sleep(self) -> None:
        self.pause(self.duration)


def count_down_from(start: int) -> Iterator[int]:
    """Yield ``start`` down to 1."""
    yield from range(start, 0, -1)


def countdown(out: TextIO, sleeper: Sleeper) -> None:
    """Write the countdown to ``out``, sleeping after each number."""
    for number in count_down_from(COUNTDOWN_START):
        out.write(f"{number}\n")
        sleeper.sleep()
    out.write(FINAL_WORD)


def main(argv: Sequence[str] | None = None) -> int:
    """Count down on standard output, one second per step."""
    countdown(sys.stdout, ConfigurableSleeper(1.0, time.sleep))
    return 0