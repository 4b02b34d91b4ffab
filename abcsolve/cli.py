"""Command-line front end: read a problem's input, print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from abcsolve import contest_a, contest_b, contest_c


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.int(), self.int()) for _ in range(count)]


_Handler = Callable[[_Tokens], str]
_PROBLEMS: dict[str, _Handler] = {}

# Indexed by a boolean verdict: False -> "No", True -> "Yes".
_VERDICT = ("No", "Yes")


def _problem(name: str) -> Callable[[_Handler], _Handler]:
    def register(handler: _Handler) -> _Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


def _join(values) -> str:
    return " ".join(map(str, values))


def _format_float(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


# A-level problems


@_problem("count_increasing_pairs")
def _count_increasing_pairs(tok: _Tokens) -> str:
    return str(contest_a.count_increasing_pairs(tok.pairs(tok.int())))


@_problem("is_long_enough")
def _is_long_enough(tok: _Tokens) -> str:
    password = tok.word()
    return _VERDICT[bool(contest_a.is_long_enough(password, tok.int()))]


@_problem("count_eligible_races")
def _count_eligible_races(tok: _Tokens) -> str:
    limits = tok.ints(tok.int())
    return str(contest_a.count_eligible_races(limits, tok.int()))


@_problem("shared_free_day")
def _shared_free_day(tok: _Tokens) -> str:
    n = tok.int()
    s, t = tok.word(), tok.word()
    return _VERDICT[bool(contest_a.shared_free_day(s[:n], t[:n]))]


@_problem("fits_intervals")
def _fits_intervals(tok: _Tokens) -> str:
    n, gap = tok.int(), tok.int()
    return _VERDICT[bool(contest_a.fits_intervals(tok.ints(n), gap))]


@_problem("first_missing_letter")
def _first_missing_letter(tok: _Tokens) -> str:
    return contest_a.first_missing_letter(tok.word()) or ""


@_problem("sum_odd_positions")
def _sum_odd_positions(tok: _Tokens) -> str:
    return str(contest_a.sum_odd_positions(tok.ints(tok.int())))


@_problem("ends_with_tea")
def _ends_with_tea(tok: _Tokens) -> str:
    n = tok.int()
    return _VERDICT[bool(contest_a.ends_with_tea(tok.word()[:n]))]


@_problem("trim")
def _trim(tok: _Tokens) -> str:
    n, head, tail = tok.ints(3)
    return contest_a.trim(tok.word()[:n], head, tail)


@_problem("all_open")
def _all_open(tok: _Tokens) -> str:
    n, left, right = tok.ints(3)
    return _VERDICT[bool(contest_a.all_open(tok.word()[:n], left, right))]


@_problem("contains")
def _contains(tok: _Tokens) -> str:
    values = tok.ints(tok.int())
    return _VERDICT[bool(contest_a.contains(values, tok.int()))]


@_problem("count_covering")
def _count_covering(tok: _Tokens) -> str:
    n, left, right = tok.ints(3)
    return str(contest_a.count_covering(tok.pairs(n), left, right))


@_problem("within_budget")
def _within_budget(tok: _Tokens) -> str:
    n, limit = tok.int(), tok.int()
    return _VERDICT[bool(contest_a.within_budget(tok.ints(n), limit))]


# B-level problems


@_problem("abbreviations_covered")
def _abbreviations_covered(tok: _Tokens) -> str:
    s, t = tok.word(), tok.word()
    return _VERDICT[bool(contest_b.abbreviations_covered(s, t))]


@_problem("pairwise_distances")
def _pairwise_distances(tok: _Tokens) -> str:
    n = tok.int()
    gaps = tok.ints(max(n - 1, 0))
    return "\n".join(_join(row) for row in contest_b.pairwise_distances(gaps))


@_problem("assign_balls")
def _assign_balls(tok: _Tokens) -> str:
    n, k = tok.int(), tok.int()
    return _join(contest_b.assign_balls(n, tok.ints(k)))


@_problem("h_index")
def _h_index(tok: _Tokens) -> str:
    return str(contest_b.h_index(tok.ints(tok.int())))


@_problem("distinct_sorted")
def _distinct_sorted(tok: _Tokens) -> str:
    values = contest_b.distinct_sorted(tok.ints(tok.int()))
    return f"{len(values)}\n{_join(values)}"


@_problem("min_rotation_cost")
def _min_rotation_cost(tok: _Tokens) -> str:
    n = tok.int()
    s = tok.words(n)
    t = tok.words(n)
    return str(contest_b.min_rotation_cost(s, t))


@_problem("count_abc_triples")
def _count_abc_triples(tok: _Tokens) -> str:
    return str(contest_b.count_abc_triples(tok.word()))


@_problem("max_t_density")
def _max_t_density(tok: _Tokens) -> str:
    return _format_float(contest_b.max_t_density(tok.word()))


@_problem("remove_each")
def _remove_each(tok: _Tokens) -> str:
    n, m = tok.int(), tok.int()
    values = tok.ints(n)
    return _join(contest_b.remove_each(values, tok.ints(m)))


@_problem("place_markers")
def _place_markers(tok: _Tokens) -> str:
    return contest_b.place_markers(tok.word())


@_problem("expand_runs")
def _expand_runs(tok: _Tokens) -> str:
    runs = [(tok.word(), tok.int()) for _ in range(tok.int())]
    result = contest_b.expand_runs(runs)
    return "Too Long" if result is None else result


@_problem("pair_hash_marks")
def _pair_hash_marks(tok: _Tokens) -> str:
    return "\n".join(f"{a},{b}" for a, b in contest_b.pair_hash_marks(tok.word()))


@_problem("count_distinct_concatenations")
def _count_distinct_concatenations(tok: _Tokens) -> str:
    return str(contest_b.count_distinct_concatenations(tok.words(tok.int())))


# C-level problems


@_problem("min_domino_chain")
def _min_domino_chain(tok: _Tokens) -> str:
    cases = tok.int()
    return "\n".join(
        str(contest_c.min_domino_chain(tok.ints(tok.int()))) for _ in range(cases)
    )


@_problem("toggle_segments")
def _toggle_segments(tok: _Tokens) -> str:
    n, q = tok.int(), tok.int()
    return "\n".join(map(str, contest_c.toggle_segments(n, tok.ints(q))))


@_problem("is_single_cycle")
def _is_single_cycle(tok: _Tokens) -> str:
    n, m = tok.int(), tok.int()
    return _VERDICT[bool(contest_c.is_single_cycle(n, tok.pairs(m)))]


@_problem("count_matching_pairs")
def _count_matching_pairs(tok: _Tokens) -> str:
    return str(contest_c.count_matching_pairs(tok.ints(tok.int())))


@_problem("kth_concatenation")
def _kth_concatenation(tok: _Tokens) -> str:
    n, k, x = tok.ints(3)
    return contest_c.kth_concatenation(tok.words(n), k, x)


@_problem("sum_double_palindromes")
def _sum_double_palindromes(tok: _Tokens) -> str:
    base, limit = tok.int(), tok.int()
    return str(contest_c.sum_double_palindromes(base, limit))


@_problem("can_mix_safely")
def _can_mix_safely(tok: _Tokens) -> str:
    cases = tok.int()
    answers = []
    for _ in range(cases):
        n = tok.int()
        answers.append(_VERDICT[bool(contest_c.can_mix_safely(n, tok.word()))])
    return "\n".join(answers)


@_problem("segment_queue")
def _segment_queue(tok: _Tokens) -> str:
    queue = contest_c.SegmentQueue()
    answers = []
    for _ in range(tok.int()):
        kind = tok.int()
        if kind == 1:
            length, value = tok.int(), tok.int()
            queue.push(length, value)
        elif kind == 2:
            answers.append(str(queue.pop_sum(tok.int())))
        else:
            raise ValueError(f"unknown query type {kind}")
    return "\n".join(answers)


def solve(problem: str, text: str) -> str:
    """Solve ``problem`` for the whitespace-separated input ``text`` and return the output."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return handler(_Tokens(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="abcsolve", description="Solve a contest problem from its input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    try:
        output = solve(args.problem, text)
    except (ValueError, IndexError) as exc:
        print(f"abcsolve: error: {exc}", file=sys.stderr)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())