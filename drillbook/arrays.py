"""Array and integer exercises: counting, folding, reshaping and small sequences."""

from __future__ import annotations

import math
from collections import Counter
from functools import reduce
from itertools import pairwise
from operator import or_, xor
from typing import Callable, Iterable, Sequence


def _require_items(arr: Sequence[int], what: str) -> None:
    if not arr:
        raise ValueError(f"{what} of an empty sequence")


def _truncating_half(n: int) -> int:
    """Halve ``n`` rounding toward zero, as fixed-width integer division does."""
    return -((-n) // 2) if n < 0 else n // 2


def frequency_count(arr: Sequence[int], p: int) -> list[int]:
    """Count each value 1..p in ``arr``.

    The result has the length of ``arr``: slot ``i`` holds the count of value
    ``i + 1`` for the first ``p`` slots, and the remaining slots are zero.
    """
    counts = Counter(arr)
    tallies = [counts[value] for value in range(1, p + 1)]
    return (tallies + [0] * len(arr))[: len(arr)]


def _combine_adjacent(arr: Sequence[int], op: Callable[[int, int], int]) -> list[int]:
    if not arr:
        return []
    return [op(left, right) for left, right in pairwise(arr)] + [arr[-1]]


def xor_adjacent(arr: Sequence[int]) -> list[int]:
    """Replace each element by its XOR with the next one; the last stays."""
    return _combine_adjacent(arr, xor)


def or_adjacent(arr: Sequence[int]) -> list[int]:
    """Replace each element by its OR with the next one; the last stays."""
    return _combine_adjacent(arr, or_)


def largest(arr: Sequence[int]) -> int:
    """Return the largest element."""
    _require_items(arr, "largest")
    return max(arr)


def count_occurrences(arr: Iterable[int], x: int) -> int:
    """Return how many times ``x`` appears in ``arr`` (0 if absent)."""
    return sum(1 for item in arr if item == x)


def max_times_min(a: Sequence[int], b: Sequence[int]) -> int:
    """Multiply the maximum of ``a`` by the minimum of ``b``."""
    _require_items(a, "maximum")
    _require_items(b, "minimum")
    return max(a) * min(b)


def reverse_squared_sum(arr: Sequence[int]) -> int:
    """Reverse ``arr``; sum squares at even positions minus squares at odd ones."""
    reversed_items = list(reversed(arr))
    even = sum(value * value for value in reversed_items[0::2])
    odd = sum(value * value for value in reversed_items[1::2])
    return even - odd


def convert_to_wave(arr: Sequence[int]) -> list[int]:
    """Swap each consecutive pair; an unpaired last element stays in place."""
    wave = list(arr)
    wave[0 : len(wave) - 1 : 2], wave[1::2] = wave[1::2], wave[0 : len(wave) - 1 : 2]
    return wave


def find_single(arr: Sequence[int]) -> int:
    """Return the element that appears an odd number of times (XOR of all)."""
    _require_items(arr, "single element")
    return reduce(xor, arr)


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("fibonacci is not defined for negative indices")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def mth_half(n: int, m: int) -> int:
    """Return the value of ``n`` at the ``m``-th step of repeated halving."""
    for _ in range(m - 1):
        n = _truncating_half(n)
    return n


def min_max(arr: Sequence[int]) -> tuple[int, int]:
    """Return ``(minimum, maximum)`` of ``arr``."""
    _require_items(arr, "min/max")
    return min(arr), max(arr)


def maximize_money(n: int, k: int) -> int:
    """Money from robbing every other of ``n`` houses holding ``k`` each."""
    half = _truncating_half(n)
    return (half + 1) * k if n % 2 else half * k


def reversed_array(arr: Sequence[int]) -> list[int]:
    """Return the elements of ``arr`` in reverse order."""
    return list(reversed(arr))


def sum_elements(arr: Iterable[int]) -> int:
    """Return the sum of the elements."""
    return sum(arr)


def value_equal_to_index(arr: Sequence[int]) -> list[int]:
    """Return the values that equal their 1-based position."""
    return [value for position, value in enumerate(arr, start=1) if value == position]