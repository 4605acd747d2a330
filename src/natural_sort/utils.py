"""Utility helpers for digit runs and line lists."""
from __future__ import annotations


def is_digit(char: str) -> bool:
    """Return True for the ASCII digits 0-9 only."""
    return "0" <= char <= "9"


def digit_run_end(value: str, start: int) -> int:
    """Return the index just past the run of digits beginning at ``start``."""
    end = start
    length = len(value)
    while end < length and "0" <= value[end] <= "9":
        end += 1
    return end


def exclude_leading_zeroes(value: str, start: int = 0, end: int | None = None) -> int:
    """Skip leading '0' characters of ``value[start:end]``.

    Returns the index of the first non-zero character, ``start`` itself when
    there is no leading zero, or ``end`` when the run holds only zeroes.

    >>> exclude_leading_zeroes("00100200")
    2
    >>> exclude_leading_zeroes("000")
    3
    """
    if end is None:
        end = len(value)
    index = start
    while index < end and value[index] == "0":
        index += 1
    return index


def dedupe(values: list[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence."""
    return list(dict.fromkeys(values))
