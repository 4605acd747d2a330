"""Configuration dataclasses for natural sorting."""
from __future__ import annotations

from dataclasses import dataclass

INVARIANT_CULTURE = ""


@dataclass(slots=True)
class SortConfig:
    culture: str = INVARIANT_CULTURE
    reverse: bool = False
    unique: bool = False
    ignore_blank: bool = True
