"""Visit every string reachable inside a value."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from typing import Any


def walk(x: Any, fn: Callable[[str], None]) -> None:
    """Call ``fn`` with every string found inside ``x``.

    Strings are reported, mappings contribute their values, dataclass
    instances their fields in order, lists and tuples their items, iterators
    everything they yield, and functions whatever they return when called
    with no arguments. Anything else is ignored.
    """
    if isinstance(x, str):
        fn(x)
    elif isinstance(x, Mapping):
        for value in x.values():
            walk(value, fn)
    elif dataclasses.is_dataclass(x) and not isinstance(x, type):
        for field in dataclasses.fields(x):
            walk(getattr(x, field.name), fn)
    elif isinstance(x, (list, tuple)):
        for item in x:
            walk(item, fn)
    elif isinstance(x, Iterator):
        for item in x:
            walk(item, fn)
    elif callable(x) and not isinstance(x, type):
        walk(x(), fn)