"""Sorting helpers built on the natural sort comparer."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Callable, Iterable, Optional, TypeVar

from .core.comparer import NaturalSortComparer

T = TypeVar("T")

logger = logging.getLogger(__name__)

_DEFAULT_COMPARER = NaturalSortComparer()


def default_comparer() -> NaturalSortComparer:
    """Return the shared invariant-culture comparer."""
    return _DEFAULT_COMPARER


def natural_sort_key(
    comparer: Optional[NaturalSortComparer] = None,
    key: Optional[Callable[[Any], Optional[str]]] = None,
) -> Callable[[Any], Any]:
    """Build a ``key=`` function, optionally projecting items to strings first.

    >>> files = [{"name": "b10"}, {"name": "b9"}]
    >>> [f["name"] for f in sorted(files, key=natural_sort_key(key=lambda f: f["name"]))]
    ['b9', 'b10']
    """
    wrapper = (_DEFAULT_COMPARER if comparer is None else comparer).key
    if key is None:
        return wrapper

    def _projected(item: Any) -> Any:
        return wrapper(key(item))

    return _projected


def natural_sorted(
    iterable: Iterable[T],
    *,
    key: Optional[Callable[[T], Optional[str]]] = None,
    reverse: bool = False,
    comparer: Optional[NaturalSortComparer] = None,
) -> list[T]:
    """Return a new list sorted in natural order. The sort is stable."""
    start = perf_counter()
    items = sorted(iterable, key=natural_sort_key(comparer, key), reverse=reverse)
    logger.debug("Sorted %s items in %.4fs", len(items), perf_counter() - start)
    return items


def natural_sort(
    items: list[T],
    *,
    key: Optional[Callable[[T], Optional[str]]] = None,
    reverse: bool = False,
    comparer: Optional[NaturalSortComparer] = None,
) -> None:
    """Sort ``items`` in place."""
    start = perf_counter()
    items.sort(key=natural_sort_key(comparer, key), reverse=reverse)
    logger.debug("Sorted %s items in place in %.4fs", len(items), perf_counter() - start)


__all__ = ["default_comparer", "natural_sort", "natural_sort_key", "natural_sorted"]
