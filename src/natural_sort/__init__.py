"""Natural (alphanumeric) string ordering: "file2" before "file10"."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import INVARIANT_CULTURE, SortConfig
from .core.comparer import NaturalSortComparer, compare_numbers
from .core.folding import FoldingPolicy
from .errors import ConfigurationError, NaturalSortError, SourceError
from .sorting import natural_sort, natural_sort_key, natural_sorted

__all__ = [
    "INVARIANT_CULTURE",
    "SortConfig",
    "NaturalSortComparer",
    "compare_numbers",
    "FoldingPolicy",
    "ConfigurationError",
    "NaturalSortError",
    "SourceError",
    "natural_sort",
    "natural_sort_key",
    "natural_sorted",
    "load_entries",
    "read_lines",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in {"load_entries", "read_lines"}:
        module = import_module(".sources", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
