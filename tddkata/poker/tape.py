"""A file wrapper that rewrites the file from the start on every write."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO


@dataclass
class Tape:
    file: IO

    def write(self, data) -> int:
        self.file.truncate(0)
        self.file.seek(0)
        return self.file.write(data)