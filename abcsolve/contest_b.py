"""Solutions to the B-level problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, permutations

_MAX_LENGTH = 100


def abbreviations_covered(s: str, t: str) -> bool:
    """Return whether every capital from the third character on follows a character found in ``t``."""
    return all(
        s[i - 1] in t for i in range(2, len(s)) if "A" <= s[i] <= "Z"
    )


def pairwise_distances(gaps: Sequence[int]) -> list[list[int]]:
    """For each station, list the distances to every later station."""
    return [list(accumulate(gaps[i:])) for i in range(len(gaps))]


def assign_balls(n: int, balls: Iterable[int]) -> list[int]:
    """Put each ball in its box; a 0 goes to the emptiest box (lowest index on ties)."""
    counts = [0] * n
    order = []
    for ball in balls:
        if ball == 0:
            box = min(range(n), key=counts.__getitem__)
        elif 1 <= ball <= n:
            box = ball - 1
        else:
            raise ValueError(f"ball names box {ball}, but there are only {n}")
        counts[box] += 1
        order.append(box + 1)
    return order


def h_index(values: Iterable[int]) -> int:
    """Return the largest h such that h values are each at least h."""
    best = 0
    for rank, value in enumerate(sorted(values, reverse=True), start=1):
        if value < rank:
            break
        best = rank
    return best


def distinct_sorted(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def _rotate(grid: list[str]) -> list[str]:
    return ["".join(row) for row in zip(*reversed(grid))]


def min_rotation_cost(s: Sequence[str], t: Sequence[str]) -> int:
    """Minimum of quarter-turns plus cell changes needed to turn grid ``s`` into ``t``."""
    n = len(s)
    if len(t) != n or any(len(row) != n for row in (*s, *t)):
        raise ValueError("grids must be square and of the same size")
    grid = list(s)
    best = None
    for turns in range(4):
        diff = sum(a != b for row_s, row_t in zip(grid, t) for a, b in zip(row_s, row_t))
        cost = diff + turns
        if best is None or cost < best:
            best = cost
        grid = _rotate(grid)
    return best


def count_abc_triples(s: str) -> int:
    """Count evenly spaced positions holding ``A``, ``B`` and ``C`` in that order."""
    count = 0
    for i, a in enumerate(s):
        if a != "A":
            continue
        for j in range(i + 1, len(s)):
            if s[j] != "B":
                continue
            k = 2 * j - i
            if k >= len(s):
                break
            if s[k] == "C":
                count += 1
    return count


def max_t_density(s: str) -> float:
    """Best share of ``t`` inside a stretch that begins and ends with ``t``, ends excluded."""
    best = 0.0
    for i, a in enumerate(s):
        if a != "t":
            continue
        inner = 0
        for j in range(i + 1, len(s)):
            if s[j] == "t":
                if j >= i + 2:
                    best = max(best, inner / (j - i - 1))
                inner += 1
    return best


def remove_each(values: Iterable[int], removals: Iterable[int]) -> list[int]:
    """Remove one occurrence of each removal, where present."""
    remaining = list(values)
    for value in removals:
        if value in remaining:
            remaining.remove(value)
    return remaining


def place_markers(s: str) -> str:
    """Mark the first ``.`` after each wall (and at the start) with ``o``."""
    out = []
    fresh = True
    for c in s:
        if c == "#":
            out.append("#")
            fresh = True
        elif c == "." and fresh:
            out.append("o")
            fresh = False
        else:
            out.append(".")
    return "".join(out)


def expand_runs(runs: Iterable[tuple[str, int]]) -> str | None:
    """Expand ``(text, count)`` runs, or return None once the result would exceed 100 characters."""
    parts = []
    length = 0
    for text, count in runs:
        if length + count > _MAX_LENGTH:
            return None
        parts.append(text * count)
        length += len(text) * count
    return "".join(parts)


def pair_hash_marks(s: str) -> list[tuple[int, int]]:
    """Pair consecutive ``#`` characters, giving 1-based positions."""
    marks = [i for i, c in enumerate(s, start=1) if c == "#"]
    return list(zip(marks[::2], marks[1::2]))


def count_distinct_concatenations(words: Sequence[str]) -> int:
    """Count the distinct strings formed by joining two different entries."""
    return len({a + b for a, b in permutations(words, 2)})