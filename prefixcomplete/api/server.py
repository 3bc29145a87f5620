"""Uvicorn entrypoint for running the API server."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from prefixcomplete.config.logging_config import setup_logging
from prefixcomplete.config.settings import Settings, get_settings


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve prefix autocomplete over HTTP.")
    parser.add_argument("--host", default=settings.api.host, help="Bind address.")
    parser.add_argument("--port", type=int, default=settings.api.port, help="Bind port.")
    parser.add_argument(
        "--log-level",
        default=settings.logging.level.lower(),
        choices=["debug", "info", "warning", "error", "critical"],
        help="Uvicorn log level.",
    )
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)

    setup_logging(log_dir=settings.logs_dir, log_settings=settings.logging)
    logger = logging.getLogger(__name__)

    # create_app builds the index from settings.terms_path in each worker
    logger.info(
        "Starting API server on %s:%d (terms: %s)",
        args.host, args.port, settings.terms_path,
    )
    uvicorn.run(
        "prefixcomplete.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=args.reload,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
