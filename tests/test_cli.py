import io

import pytest

from abcsolve import contest_a, contest_b, contest_c
from abcsolve.cli import main, solve


def test_count_increasing_pairs_matches_library():
    out = solve("count_increasing_pairs", "3\n1 2\n3 1\n4 5\n")
    assert out == str(contest_a.count_increasing_pairs([(1, 2), (3, 1), (4, 5)]))


def test_is_long_enough_yes_and_no():
    assert solve("is_long_enough", "chokudai 5") == "Yes"
    assert solve("is_long_enough", "abc 5") == "No"


def test_first_missing_letter_none_prints_nothing():
    assert solve("first_missing_letter", "abcdefghijklmnopqrstuvwxyz") == ""


def test_first_missing_letter_found():
    text = "abcdefghijklmnopqrstuvwxy"
    assert solve("first_missing_letter", text) == contest_a.first_missing_letter(text)


def test_trim_uses_length_prefix():
    assert solve("trim", "5 1 1 abcde") == contest_a.trim("abcde", 1, 1)


def test_pairwise_distances_rows():
    out = solve("pairwise_distances", "4\n1 2 3\n")
    lines = out.splitlines()
    expected = contest_b.pairwise_distances([1, 2, 3])
    assert len(lines) == 3
    assert [list(map(int, line.split())) for line in lines] == expected


def test_distinct_sorted_prints_count_then_values():
    out = solve("distinct_sorted", "5\n3 1 3 2 1\n")
    first, second = out.splitlines()
    values = list(map(int, second.split()))
    assert int(first) == len(values)
    assert values == sorted(set(values))


def test_expand_runs_too_long():
    assert solve("expand_runs", "2\na 60\nb 50\n") == "Too Long"


def test_expand_runs_short():
    assert solve("expand_runs", "2\na 2\nb 3\n") == contest_b.expand_runs([("a", 2), ("b", 3)])


def test_max_t_density_formats_like_integers_when_whole():
    assert solve("max_t_density", "tat") == "0"
    assert solve("max_t_density", "ttt") == "1"


def test_max_t_density_fraction_round_trips():
    out = solve("max_t_density", "tattaat")
    assert float(out) == contest_b.max_t_density("tattaat")


def test_pair_hash_marks_lines():
    s = "#..#.#.#"
    out = solve("pair_hash_marks", s)
    assert out == "\n".join(f"{a},{b}" for a, b in contest_b.pair_hash_marks(s))


def test_min_domino_chain_one_line_per_case():
    out = solve("min_domino_chain", "2\n4\n1 3 2 5\n3\n1 5 10\n")
    assert out.splitlines() == [
        str(contest_c.min_domino_chain([1, 3, 2, 5])),
        str(contest_c.min_domino_chain([1, 5, 10])),
    ]


def test_toggle_segments_lines():
    out = solve("toggle_segments", "5 4\n1 3 2 2\n")
    assert out.splitlines() == [str(v) for v in contest_c.toggle_segments(5, [1, 3, 2, 2])]


def test_is_single_cycle():
    assert solve("is_single_cycle", "3 3\n1 2\n2 3\n3 1\n") == "Yes"
    assert solve("is_single_cycle", "3 2\n1 2\n2 3\n") == "No"


def test_can_mix_safely_cases():
    out = solve("can_mix_safely", "2\n1 0\n1 1\n")
    assert out.splitlines() == ["Yes", "No"]


def test_segment_queue_matches_library():
    out = solve("segment_queue", "5\n1 2 3\n1 4 5\n2 3\n2 1\n2 2\n")
    queue = contest_c.SegmentQueue()
    queue.push(2, 3)
    queue.push(4, 5)
    expected = [queue.pop_sum(3), queue.pop_sum(1), queue.pop_sum(2)]
    assert out.splitlines() == [str(v) for v in expected]


def test_segment_queue_bad_query_type():
    with pytest.raises(ValueError):
        solve("segment_queue", "1\n3 1\n")


def test_unknown_problem():
    with pytest.raises(ValueError):
        solve("no_such_problem", "1")


def test_truncated_input():
    with pytest.raises(ValueError):
        solve("count_increasing_pairs", "3\n1 2\n")


def test_non_integer_input():
    with pytest.raises(ValueError):
        solve("h_index", "x")


def test_main_reads_stdin(monkeypatch, capsys):
    text = "3\n1 2\n3 1\n4 5\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(["count_increasing_pairs"])
    out = capsys.readouterr().out
    assert code == 0
    assert out == solve("count_increasing_pairs", text) + "\n"


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("chokudai 5\n", encoding="utf-8")
    assert main(["is_long_enough", str(path)]) == 0
    assert capsys.readouterr().out == "Yes\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    code = main(["count_increasing_pairs"])
    captured = capsys.readouterr()
    assert code == 1
    assert "error" in captured.err
    assert captured.out == ""