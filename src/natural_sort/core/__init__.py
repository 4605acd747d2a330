"""Pure comparison building blocks for natural sorting."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "NaturalSortComparer",
    "compare_numbers",
    "FoldingPolicy",
    "INVARIANT",
    "normalize_culture",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {"NaturalSortComparer", "compare_numbers"}:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    if name in {"FoldingPolicy", "INVARIANT", "normalize_culture"}:
        module = import_module(".folding", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
