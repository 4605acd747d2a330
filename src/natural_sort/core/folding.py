"""Culture-aware single-character case folding."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from ..config import INVARIANT_CULTURE
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

_INVARIANT_ALIASES = {"", "invariant"}
_CULTURE_RE = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{1,8})*$")

# Dotted/dotless i pairs upper-case differently in Turkic languages.
_TURKIC_OVERRIDES = MappingProxyType({"i": "İ", "ı": "I"})

_OVERRIDES: dict[str, Mapping[str, str]] = {
    "tr": _TURKIC_OVERRIDES,
    "az": _TURKIC_OVERRIDES,
}

_NO_OVERRIDES: Mapping[str, str] = MappingProxyType({})


def normalize_culture(culture: Optional[str]) -> str:
    """Validate a culture tag and return it in canonical form.

    ``"tr_tr"`` becomes ``"tr-TR"``; the invariant aliases become ``""``.
    """
    if culture is None:
        raise ConfigurationError("culture is required; pass '' for the invariant culture")
    if not isinstance(culture, str):
        raise ConfigurationError(f"culture must be a string, got {type(culture).__name__}")
    tag = culture.strip()
    if tag.lower() in _INVARIANT_ALIASES:
        return INVARIANT_CULTURE
    if not _CULTURE_RE.match(tag):
        raise ConfigurationError(f"Invalid culture tag: {culture!r}")
    language, *subtags = re.split(r"[-_]", tag)
    parts = [language.lower()]
    for subtag in subtags:
        if len(subtag) == 2 and subtag.isalpha():
            parts.append(subtag.upper())
        elif len(subtag) == 4 and subtag.isalpha():
            parts.append(subtag.title())
        else:
            parts.append(subtag.lower())
    return "-".join(parts)


@dataclass(frozen=True, slots=True)
class FoldingPolicy:
    culture: str = INVARIANT_CULTURE
    overrides: Mapping[str, str] = field(
        default_factory=lambda: _NO_OVERRIDES, repr=False, compare=False
    )

    @classmethod
    def from_culture(cls, culture: Optional[str]) -> "FoldingPolicy":
        tag = normalize_culture(culture)
        if not tag:
            return cls()
        language = tag.split("-", 1)[0]
        overrides = _OVERRIDES.get(language)
        if overrides is None:
            logger.debug("No case-folding overrides for %s; using invariant mapping", tag)
            overrides = _NO_OVERRIDES
        return cls(culture=tag, overrides=overrides)

    @property
    def is_invariant(self) -> bool:
        return self.culture == INVARIANT_CULTURE

    def upper(self, char: str) -> str:
        """Upper-case a single character, keeping it when there is no 1:1 mapping."""
        mapped = self.overrides.get(char)
        if mapped is not None:
            return mapped
        upper = char.upper()
        return upper if len(upper) == 1 else char


INVARIANT = FoldingPolicy()

__all__ = ["FoldingPolicy", "INVARIANT", "normalize_culture"]
