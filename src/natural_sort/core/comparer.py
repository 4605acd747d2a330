"""Natural (alphanumeric) string comparison."""
from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Callable, Optional

from ..config import INVARIANT_CULTURE
from ..utils import digit_run_end, exclude_leading_zeroes, is_digit
from .folding import FoldingPolicy

logger = logging.getLogger(__name__)


class NaturalSortComparer:
    """Compares strings naturally, treating runs of digits as numbers.

    See https://en.wikipedia.org/wiki/Natural_sort_order.

    Only whole numbers made of the digits 0-9 are recognised. Decimal
    fractions, signs and scientific notation are not: ``'-'``, ``'+'`` and
    ``'.'`` compare like any other character, so ``"21.49"`` sorts after
    ``"21.5"`` (the runs 49 and 5 are compared as integers). That keeps
    version strings such as ``"1.10.0"`` and ``"1.9.0"`` in a sensible order.

    Non-digit characters are compared one at a time after upper-casing them
    with the culture's folding policy.

    >>> comparer = NaturalSortComparer()
    >>> comparer.compare("file2.txt", "file10.txt") < 0
    True
    >>> comparer.compare("11z", "2zzz") > 0
    True
    >>> comparer.compare("10", "010") > 0
    True

    The last example is a convention rather than a necessity: numerically
    equal runs are ordered so the one with more leading zeroes comes first,
    the way Windows Explorer lists files.

    The result is negative, zero or positive. ``None`` sorts before any
    string.
    """

    __slots__ = ("_policy", "_key")

    def __init__(self, culture: Optional[str] = INVARIANT_CULTURE) -> None:
        self._policy = FoldingPolicy.from_culture(culture)
        self._key = cmp_to_key(self.compare)
        logger.debug("Natural sort comparer ready (culture=%r)", self._policy.culture)

    @property
    def culture(self) -> str:
        return self._policy.culture

    @property
    def policy(self) -> FoldingPolicy:
        return self._policy

    @property
    def key(self) -> Callable[[Any], Any]:
        """Key wrapper usable with ``sorted``, ``min``, ``max`` and ``bisect``."""
        return self._key

    def __call__(self, x: Optional[str], y: Optional[str]) -> int:
        return self.compare(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaturalSortComparer):
            return NotImplemented
        return self._policy == other._policy

    def __hash__(self) -> int:
        return hash((NaturalSortComparer, self._policy))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(culture={self._policy.culture!r})"

    def compare(self, x: Optional[str], y: Optional[str]) -> int:
        if x is None:
            return 0 if y is None else -1
        if y is None:
            return 1

        x_length = len(x)
        y_length = len(y)
        index = 0
        while index < x_length and index < y_length:
            x_char = x[index]
            y_char = y[index]

            if is_digit(x_char) and is_digit(y_char):
                x_end = digit_run_end(x, index)
                y_end = digit_run_end(y, index)
                comparison = _compare_number_runs(x, index, x_end, y, index, y_end)
                if comparison:
                    return comparison
                index = max(x_end, y_end)
                continue

            comparison = self._compare_characters(x_char, y_char)
            if comparison:
                return comparison
            index += 1

        # Either both strings matched ("a1a" vs "a1a") or one is a prefix
        # of the other ("a1a" vs "a1aa").
        return x_length - y_length

    def _compare_characters(self, x: str, y: str) -> int:
        if x == y:
            return 0
        upper_x = self._policy.upper(x)
        upper_y = self._policy.upper(y)
        return ord(upper_x) - ord(upper_y)


def compare_numbers(x: str, y: str) -> int:
    """Compare two digit-only strings by value.

    Leading zeroes are ignored for the magnitude; when the values are equal
    the string with more leading zeroes is the smaller one.

    >>> compare_numbers("12", "13")
    -1
    >>> compare_numbers("013", "12")
    1
    >>> compare_numbers("012", "12")
    -1
    """
    return _compare_number_runs(x, 0, len(x), y, 0, len(y))


def _compare_number_runs(
    x: str, x_start: int, x_end: int, y: str, y_start: int, y_end: int
) -> int:
    x_digits = exclude_leading_zeroes(x, x_start, x_end)
    y_digits = exclude_leading_zeroes(y, y_start, y_end)

    # Without leading zeroes a longer number is always greater: 1000 > 999.
    # An all-zero run has no significant digits and sorts below any other.
    x_significant = x_end - x_digits
    y_significant = y_end - y_digits
    if x_significant != y_significant:
        return 1 if x_significant > y_significant else -1

    for offset in range(x_significant):
        x_digit = x[x_digits + offset]
        y_digit = y[y_digits + offset]
        if x_digit != y_digit:
            return 1 if x_digit > y_digit else -1

    # Same value: the run with more leading zeroes sorts first ("010" < "10",
    # "00" < "0"). Only runs of equal raw length compare equal, which keeps
    # both strings aligned when the scan resumes.
    # Treating all-zero runs of different lengths as equal would break
    # transitivity: "0a" == "00" == "0b" while "0a" < "0b".
    return (y_end - y_start) - (x_end - x_start)


__all__ = ["NaturalSortComparer", "compare_numbers"]
