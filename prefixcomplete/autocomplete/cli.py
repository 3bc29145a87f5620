"""Autocomplete CLI: build an index from a terms file and query it."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional, Sequence

from prefixcomplete.autocomplete.builder import IMPLEMENTATIONS, AutocompleteBuilder
from prefixcomplete.config.logging_config import setup_logging
from prefixcomplete.config.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weighted prefix autocomplete.")
    parser.add_argument("--terms", type=Path, default=None, help="Terms file (default: data/terms.txt).")
    parser.add_argument("--impl", choices=sorted(IMPLEMENTATIONS), default=None, help="Index variant.")
    sub = parser.add_subparsers(dest="command")

    top = sub.add_parser("top", help="Print the heaviest word for a prefix.")
    top.add_argument("prefix", help="Prefix to complete.")

    topk = sub.add_parser("topk", help="Print the k heaviest words for a prefix.")
    topk.add_argument("prefix", help="Prefix to complete.")
    topk.add_argument("-k", "--k", type=int, default=None, help="Max suggestions.")

    sub.add_parser("info", help="Print a build summary.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir, log_settings=settings.logging)

    builder = AutocompleteBuilder(args.terms or settings.terms_path, implementation=args.impl)
    index = builder.build()

    if args.command == "top":
        print(index.top_match(args.prefix))
    elif args.command == "topk":
        k = args.k if args.k is not None else settings.autocomplete.max_suggestions
        for word in index.top_k_matches(args.prefix, k):
            print(f"  {index.weight_of(word):12.1f}  {word}")
    else:
        print(json.dumps(builder.summary(), indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
