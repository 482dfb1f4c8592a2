"""Clock face geometry and an SVG rendering of the second hand."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

SECOND_HAND_LENGTH = 90
CLOCK_CENTRE_X = 150
CLOCK_CENTRE_Y = 150

SVG_START = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg xmlns="http://www.w3.org/2000/svg"
     width="100%"
     height="100%"
     viewBox="0 0 300 300"
     version="2.0">"""

BEZEL = '<circle cx="150" cy="150" r="100" style="fill:#fff;stroke:#000;stroke-width:5px;"/>'

SVG_END = "</svg>"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def seconds_in_radians(tm: datetime) -> float:
    """Return the angle of the second hand at ``tm``, clockwise from noon."""
    seconds = tm.second
    if seconds == 0:
        return 0.0
    return math.pi / (30 / seconds)


def second_hand_point(tm: datetime) -> Point:
    """Return the tip of a unit-length second hand at ``tm``."""
    angle = seconds_in_radians(tm)
    return Point(math.sin(angle), math.cos(angle))


def second_hand(tm: datetime) -> Point:
    """Return the tip of the second hand on the 300x300 clock face."""
    unit = second_hand_point(tm)
    scaled = Point(unit.x * SECOND_HAND_LENGTH, unit.y * SECOND_HAND_LENGTH)
    flipped = Point(scaled.x, -scaled.y)
    return Point(flipped.x + CLOCK_CENTRE_X, flipped.y + CLOCK_CENTRE_Y)


def second_hand_tag(point: Point) -> str:
    """Return the SVG line element for a second hand ending at ``point``."""
    return (
        f'<line x1="150" y1="150" x2="{point.x:f}" y2="{point.y:f}" '
        'style="fill:none;stroke:#f00;stroke-width:3px;"/>'
    )


def write_svg(out: TextIO, tm: datetime) -> None:
    """Write an SVG clock showing the second hand at ``tm`` to ``out``."""
    out.write(SVG_START)
    out.write(BEZEL)
    out.write(second_hand_tag(second_hand_point(tm)))
    out.write(SVG_END)


def main(argv: Sequence[str] | None = None) -> int:
    """Print an SVG clock for the current time."""
    write_svg(sys.stdout, datetime.now())
    return 0