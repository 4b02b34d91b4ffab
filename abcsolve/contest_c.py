"""Solutions to the C-level problems."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import product

_MAX_PIECES = 5


class DisjointSet:
    """Union-find over the elements ``1..n``, tracking component sizes."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, index: int) -> None:
        if not 1 <= index <= self._n:
            raise IndexError(f"element {index} is outside 1..{self._n}")

    def find(self, index: int) -> int:
        """Return the representative of the element's component."""
        self._check(index)
        root = index
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[index] != root:
            self._parent[index], index = root, self._parent[index]
        return root

    def merge(self, a: int, b: int) -> int:
        """Join the components of ``a`` and ``b`` and return the new representative."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return x
        if self._size[x] < self._size[y]:
            x, y = y, x
        self._size[x] += self._size[y]
        self._parent[y] = x
        return x

    def size(self, a: int) -> int:
        """Return the number of elements in the component of ``a``."""
        return self._size[self.find(a)]


@dataclass
class _Segment:
    length: int
    value: int


class SegmentQueue:
    """A queue of runs of equal values, from whose front elements are taken."""

    def __init__(self) -> None:
        self._segments: deque[_Segment] = deque()
        self._total = 0

    def __len__(self) -> int:
        return self._total

    def push(self, length: int, value: int) -> None:
        """Append ``length`` copies of ``value`` at the back."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._segments.append(_Segment(length, value))
        self._total += length

    def pop_sum(self, k: int) -> int:
        """Remove the first ``k`` elements and return their sum."""
        if k < 1:
            raise ValueError("must take at least one element")
        if k > self._total:
            raise ValueError(f"cannot take {k} elements from {self._total}")
        self._total -= k
        total = 0
        while k:
            front = self._segments[0]
            taken = min(k, front.length)
            total += taken * front.value
            front.length -= taken
            k -= taken
            if front.length == 0:
                self._segments.popleft()
        return total


def min_domino_chain(values: Sequence[int]) -> int:
    """Fewest dominoes from the first to the last, each at most twice the one before; -1 if impossible."""
    n = len(values)
    if n < 2:
        raise ValueError("need at least two dominoes")
    s = [values[0], *sorted(values[1 : n - 1]), values[n - 1]]
    last = s[-1]
    current = 0
    count = 1
    while 2 * s[current] < last:
        reach = bisect_right(s, 2 * s[current], current + 1, n - 1) - 1
        if 2 * s[current] < s[reach] or s[current] >= s[reach]:
            break
        count += 1
        current = reach
    count += 1
    return count if 2 * s[current] >= last else -1


def toggle_segments(n: int, queries: Iterable[int]) -> Iterator[int]:
    """Toggle cells of a row of ``n`` and yield the number of filled runs after each toggle."""
    row = [False] * (n + 2)
    runs = 0
    for cell in queries:
        if not 1 <= cell <= n:
            raise ValueError(f"cell {cell} is outside 1..{n}")
        left, right = row[cell - 1], row[cell + 1]
        row[cell] = not row[cell]
        delta = 1 if row[cell] else -1
        if not left and not right:
            runs += delta
        elif left and right:
            runs -= delta
        yield runs


def is_single_cycle(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether the graph on ``1..n`` is one cycle through every vertex."""
    components = DisjointSet(n)
    degree = Counter()
    for a, b in edges:
        degree[a] += 1
        degree[b] += 1
        components.merge(a, b)
    if any(degree[v] != 2 for v in range(1, n + 1)):
        return False
    return components.size(1) == n


def count_matching_pairs(values: Iterable[int]) -> int:
    """Count pairs ``i < j`` whose distance ``j - i`` equals ``a[i] + a[j]``."""
    seen: Counter[int] = Counter()
    count = 0
    for i, a in enumerate(values):
        count += seen[i - a]
        seen[i + a] += 1
    return count


def kth_concatenation(words: Sequence[str], k: int, x: int) -> str:
    """Return the ``x``-th smallest string made by joining ``k`` words (repeats allowed)."""
    pieces = min(max(k, 1), _MAX_PIECES)
    joined = sorted("".join(combo) for combo in product(words, repeat=pieces))
    if not 1 <= x <= len(joined):
        raise ValueError(f"position {x} is outside 1..{len(joined)}")
    return joined[x - 1]


def is_palindrome_in_base(base: int, num: int) -> bool:
    """Return whether ``num`` reads the same both ways in ``base``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    digits = []
    while num > 0:
        num, digit = divmod(num, base)
        digits.append(digit)
    return digits == digits[::-1]


def _decimal_palindromes() -> Iterator[tuple[int, int]]:
    i = 1
    while True:
        s = str(i)
        rev = s[::-1]
        yield int(s + rev), int(s + rev[1:])
        i += 1


def sum_double_palindromes(base: int, limit: int) -> int:
    """Sum the numbers up to ``limit`` that are palindromes in base 10 and in ``base``."""
    total = 0
    for even, odd in _decimal_palindromes():
        if even > limit and odd > limit:
            break
        total += sum(
            p for p in (even, odd) if p <= limit and is_palindrome_in_base(base, p)
        )
    return total


def can_mix_safely(n: int, s: str) -> bool:
    """Return whether all ``n`` items can be added one by one, never passing through a state marked ``1``."""
    if len(s) != (1 << n) - 1:
        raise ValueError(f"expected {(1 << n) - 1} states, got {len(s)}")
    states = "0" + s
    reachable = [False] * (1 << n)
    reachable[0] = True
    for mask in range(1 << n):
        if not reachable[mask]:
            continue
        for bit in range(n):
            nxt = mask | (1 << bit)
            if nxt != mask and states[nxt] == "0":
                reachable[nxt] = True
    return reachable[-1]