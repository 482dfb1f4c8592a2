"""String repetition."""


def repeat(character: str, times: int) -> str:
    """Return ``character`` repeated ``times`` times; non-positive gives ''."""
    return character * max(times, 0)