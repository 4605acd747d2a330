"""Command-line interface for natural sorting of text lines."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

if __package__ is None or __package__ == "":  # pragma: no cover - script execution path
    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

    from natural_sort.config import SortConfig
    from natural_sort.core.comparer import NaturalSortComparer
    from natural_sort.errors import NaturalSortError
    from natural_sort.sorting import natural_sorted
    from natural_sort.sources import STDIN_MARKER, load_entries
    from natural_sort.utils import dedupe
else:  # pragma: no cover - package execution path
    from .config import SortConfig
    from .core.comparer import NaturalSortComparer
    from .errors import NaturalSortError
    from .sorting import natural_sorted
    from .sources import STDIN_MARKER, load_entries
    from .utils import dedupe

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sort lines in natural (alphanumeric) order",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="Text files, or '-' for stdin (default: stdin)",
    )
    parser.add_argument(
        "--culture",
        default="",
        help="Culture tag used to fold letter case, e.g. 'tr-TR' (default: invariant)",
    )
    parser.add_argument("--reverse", action="store_true", help="Sort in descending order")
    parser.add_argument("--unique", action="store_true", help="Drop repeated entries")
    parser.add_argument("--keep-blank", action="store_true", help="Keep blank lines in the output")
    parser.add_argument("--output", type=Path, help="Path to write the sorted entries; prints to stdout if omitted")
    parser.add_argument("--json", action="store_true", help="Emit a JSON array instead of plain lines")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    sort_config = SortConfig(
        culture=args.culture,
        reverse=args.reverse,
        unique=args.unique,
        ignore_blank=not args.keep_blank,
    )
    try:
        entries = run(args.inputs or [STDIN_MARKER], sort_config)
    except NaturalSortError as exc:
        logger.error("%s", exc)
        return 1

    if args.json:
        rendered = json.dumps(entries, indent=2, ensure_ascii=False) + "\n"
    else:
        rendered = "".join(f"{entry}\n" for entry in entries)

    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(rendered, encoding="utf-8")
        logger.info("Wrote %s entries to %s", len(entries), args.output)
    else:
        sys.stdout.write(rendered)
    return 0


def run(inputs: list[str], sort_config: SortConfig) -> list[str]:
    """Load, filter and sort the entries of ``inputs``."""
    comparer = NaturalSortComparer(sort_config.culture)
    entries = load_entries(inputs)

    if sort_config.ignore_blank:
        entries = [entry for entry in entries if entry.strip()]
    if sort_config.unique:
        entries = dedupe(entries)
    logger.info("Sorting %s entries (culture=%r)", len(entries), comparer.culture)
    return natural_sorted(entries, reverse=sort_config.reverse, comparer=comparer)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
