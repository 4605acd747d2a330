from natural_sort import utils


def test_exclude_leading_zeroes_skips_zero_prefix():
    assert utils.exclude_leading_zeroes("00100200") == 2


def test_exclude_leading_zeroes_keeps_start_without_zeroes():
    assert utils.exclude_leading_zeroes("123") == 0
    assert utils.exclude_leading_zeroes("ab123", 2) == 2


def test_exclude_leading_zeroes_all_zero_run_is_empty():
    assert utils.exclude_leading_zeroes("000") == 3
    assert utils.exclude_leading_zeroes("x000y", 1, 4) == 4


def test_exclude_leading_zeroes_respects_bounds():
    assert utils.exclude_leading_zeroes("v0012", 1, 3) == 3
    assert utils.exclude_leading_zeroes("", 0) == 0


def test_digit_run_end():
    assert utils.digit_run_end("file123.txt", 4) == 7
    assert utils.digit_run_end("42", 0) == 2
    assert utils.digit_run_end("a", 0) == 0


def test_is_digit_is_ascii_only():
    assert utils.is_digit("7")
    assert not utils.is_digit("a")
    assert not utils.is_digit("٣")  # Arabic-Indic three


def test_dedupe_keeps_first_occurrence():
    assert utils.dedupe(["b2", "a", "b2", "a1"]) == ["b2", "a", "a1"]
