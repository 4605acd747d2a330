"""Readers for the lines to be sorted: text files and stdin."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable

from .errors import SourceError

STDIN_MARKER = "-"

logger = logging.getLogger(__name__)


def read_lines(path: str) -> list[str]:
    """Read a UTF-8 text file (or stdin for ``"-"``) as a list of lines."""
    try:
        if path == STDIN_MARKER:
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError("<stdin>" if path == STDIN_MARKER else path, str(exc)) from exc
    logger.debug("Read %s", path)
    return text.splitlines()


def load_entries(inputs: Iterable[str]) -> list[str]:
    """Collect the lines of every input, in input order."""
    entries: list[str] = []
    for source in inputs:
        entries.extend(read_lines(source))
    return entries


__all__ = ["STDIN_MARKER", "load_entries", "read_lines"]
