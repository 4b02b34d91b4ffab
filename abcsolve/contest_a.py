"""Solutions to the introductory (A-level) problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise
from string import ascii_lowercase


def count_increasing_pairs(pairs: Iterable[tuple[int, int]]) -> int:
    """Count the pairs ``(a, b)`` with ``a < b``."""
    return sum(1 for a, b in pairs if a < b)


def is_long_enough(password: str, minimum: int) -> bool:
    """Return whether the text has at least ``minimum`` characters."""
    return len(password) >= minimum


def count_eligible_races(limits: Iterable[int], age: int) -> int:
    """Count the races whose age limit is at least ``age``."""
    return sum(1 for limit in limits if age <= limit)


def shared_free_day(s: str, t: str) -> bool:
    """Return whether some position is ``'o'`` in both schedules."""
    return any(a == "o" and a == b for a, b in zip(s, t))


def fits_intervals(times: Iterable[int], gap: int) -> bool:
    """Return whether no step from 0 through ``times`` is longer than ``gap``."""
    return all(b - a <= gap for a, b in pairwise([0, *times]))


def first_missing_letter(s: str) -> str | None:
    """Return the first lowercase letter absent from ``s``, or None."""
    present = set(s)
    return next((c for c in ascii_lowercase if c not in present), None)


def sum_odd_positions(values: Sequence[int]) -> int:
    """Sum the values at the 1st, 3rd, 5th, ... positions."""
    return sum(values[::2])


def ends_with_tea(s: str) -> bool:
    """Return whether the word ends in ``"tea"``."""
    return s.endswith("tea")


def trim(s: str, head: int, tail: int) -> str:
    """Drop ``head`` characters from the front and ``tail`` from the back."""
    if head < 0 or tail < 0 or head + tail > len(s):
        raise ValueError("cannot trim more characters than the string holds")
    return s[head : len(s) - tail]


def all_open(s: str, left: int, right: int) -> bool:
    """Return whether positions ``left``..``right`` (1-based) are all ``'o'``."""
    if left < 1 or right > len(s):
        raise ValueError("range lies outside the string")
    return all(c == "o" for c in s[left - 1 : right])


def contains(values: Iterable[int], x: int) -> bool:
    """Return whether ``x`` is among ``values``."""
    return x in values


def count_covering(intervals: Iterable[tuple[int, int]], left: int, right: int) -> int:
    """Count the intervals that contain the whole range ``[left, right]``."""
    return sum(1 for start, end in intervals if start <= left and right <= end)


def within_budget(values: Iterable[int], limit: int) -> bool:
    """Return whether the values add up to no more than ``limit``."""
    return sum(values) <= limit