"""Load blog posts from every file in a directory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from tddkata.blog.post import Post, new_post


def _get_post(path: Path) -> Post:
    with path.open(encoding="utf-8") as stream:
        return new_post(stream)


def new_posts_from_fs(directory: str | Path) -> list[Post]:
    """Parse each file in ``directory`` into a post, in file-name order."""
    entries = sorted(Path(directory).iterdir(), key=lambda entry: entry.name)
    return [_get_post(entry) for entry in entries if entry.is_file()]


def main(argv: Sequence[str] | None = None) -> int:
    """Print every post found in a directory."""
    parser = argparse.ArgumentParser(description="List blog posts in a directory.")
    parser.add_argument("directory", nargs="?", default="posts")
    args = parser.parse_args(argv)
    try:
        posts = new_posts_from_fs(args.directory)
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    for post in posts:
        print(post, file=sys.stderr)
        print("----", file=sys.stderr)
    return 0