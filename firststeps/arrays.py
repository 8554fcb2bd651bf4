"""Summing helpers for integer sequences."""

from collections.abc import Iterable, Sequence


def total(numbers: Iterable[int]) -> int:
    """Return the sum of all numbers."""
    return sum(numbers)


def sum_all(*args: Iterable[int]) -> list[int]:
    """Return the sum of each given sequence, in order."""
    return [total(numbers) for numbers in args]


def sum_rest(*args: Sequence[int]) -> list[int]:
    """Return, for each sequence, the sum of all but its first element.

    An empty sequence contributes 0.
    """
    return [total(numbers[1:]) if numbers else 0 for numbers in args]