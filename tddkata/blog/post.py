"""Blog posts parsed from a simple metadata-and-body text format."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

TITLE_SEPARATOR = "Title: "
DESCRIPTION_SEPARATOR = "Description: "
TAGS_SEPARATOR = "Tags: "


@dataclass
class Post:
    title: str = ""
    description: str = ""
    body: str = ""
    tags: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"Title: {self.title}\n"
            f"Description: {self.description}\n"
            f"Tags: [{' '.join(self.tags)}]\n"
            f"Body: {self.body}\n"
        )

    def sanitised_title(self) -> str:
        """Return the title in lower case with spaces turned into hyphens."""
        return self.title.replace(" ", "-").lower()


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.removesuffix("\n").removesuffix("\r")


def new_post(stream: TextIO) -> Post:
    """Read a post: title, description and tags lines, a separator, then the body."""
    lines = _lines(stream)

    def read_meta_line(prefix: str) -> str:
        return next(lines, "").removeprefix(prefix)

    title = read_meta_line(TITLE_SEPARATOR)
    description = read_meta_line(DESCRIPTION_SEPARATOR)
    tags = read_meta_line(TAGS_SEPARATOR).split(", ")
    next(lines, None)
    body = "\n".join(lines)
    return Post(title=title, description=description, body=body, tags=tags)