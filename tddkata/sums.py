"""Summing helpers built on a left fold."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")


def reduce(collection: Iterable[A], f: Callable[[B, A], B], initial_value: B) -> B:
    """Fold ``collection`` from the left with ``f``."""
    return functools.reduce(f, collection, initial_value)


def sum_of(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    return reduce(numbers, lambda total, number: total + number, 0)


def sum_all(*args: Sequence[int]) -> list[int]:
    """Return the sum of each sequence."""
    return [sum_of(numbers) for numbers in args]


def sum_all_tails(*args: Sequence[int]) -> list[int]:
    """Return the sum of each sequence without its first item; 0 when empty."""
    return reduce(args, lambda acc, numbers: [*acc, sum_of(numbers[1:])], [])