"""Shapes with areas."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True)
class Triangle(Shape):
    base: float
    height: float

    def area(self) -> float:
        return (self.base * self.height) * 0.5


def perimeter(rectangle: Rectangle) -> float:
    return 2 * (rectangle.width + rectangle.height)