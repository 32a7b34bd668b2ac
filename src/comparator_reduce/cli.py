"""Command-line tool to reduce a list of values with a named comparator."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .comparators import COMPARATORS, get_comparator
from .config import load_settings
from .logging_io import log_reduction
from .ranking import rank_by_comparator, top_n
from .selector import EmptyInputError, reduce_with_index
from .utils import coerce_item, coerce_items

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Select the extremal item of a list under a named comparator.")
    parser.add_argument("items", nargs="*", help="Items to reduce")
    parser.add_argument(
        "--compare",
        type=str.lower,
        choices=sorted(COMPARATORS),
        default=None,
        help="Comparator name (defaults to DEFAULT_COMPARATOR)",
    )
    parser.add_argument("--default", default=None, help="Value printed instead of failing on empty input")
    parser.add_argument("--rank", action="store_true", help="Print every item, most preferred first")
    parser.add_argument("--top", type=int, default=None, help="Print only the N most preferred items")
    parser.add_argument("--list", action="store_true", help="List available comparators and exit")
    parser.add_argument("--log", action="store_true", help="Append the run to the JSONL run log")
    parser.add_argument("--text", action="store_true", help="Treat every item as text")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the reduction."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.list:
        for name in sorted(COMPARATORS):
            print(name)
        return 0

    overrides = {"default_comparator": args.compare} if args.compare else {}
    try:
        settings = load_settings(**overrides)
    except ValidationError as exc:
        parser.error(f"invalid settings: {exc.errors()[0]['msg']}")
    name = settings.default_comparator
    prefers = get_comparator(name)
    numeric = settings.numeric_items and not args.text
    items = coerce_items(args.items) if numeric else list(args.items)
    logger.debug("Reducing %d items with %s", len(items), name)

    try:
        if args.rank or args.top is not None:
            if not items:
                raise EmptyInputError("No items provided")
            ranked = top_n(items, prefers, args.top) if args.top is not None else rank_by_comparator(items, prefers)
            for item in ranked:
                print(item)
            return 0
        index, result = reduce_with_index(items, prefers)
    except EmptyInputError as exc:
        if args.default is None:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        print(coerce_item(args.default) if numeric else args.default)
        return 0

    if args.log or settings.enable_run_log:
        path = log_reduction(comparator=name, items=items, result=result, index=index, log_dir=settings.log_dir)
        logger.info("Run logged to %s", path)
    print(result)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
