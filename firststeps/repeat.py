"""String repetition."""


def repeat(character: str, times: int) -> str:
    """Return ``character`` repeated ``times`` times (empty for non-positive counts)."""
    return character * max(times, 0)