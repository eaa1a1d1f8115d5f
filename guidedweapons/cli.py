"""Command that starts the weapons service."""

from __future__ import annotations

import argparse
import os
import sys

import yaml
from pymongo.errors import PyMongoError

from .config import load
from .logger import error_attr, new_logger
from .server import Server
from .service import Service
from .storage import connect


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="guidedweapons", description="Serve guided weapon data over HTTP.")
    parser.add_argument("--config", default="config.yaml", help="configuration file (default: config.yaml)")
    parser.add_argument(
        "--table-url",
        default=os.environ.get("GUIDEDWEAPONS_TABLE_URL"),
        help="CSV export of the weapons table (default: $GUIDEDWEAPONS_TABLE_URL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the service; return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        config = load(args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"guidedweapons: {exc}", file=sys.stderr)
        return 1
    try:
        log = new_logger(config.env)
    except ValueError as exc:
        print(f"guidedweapons: {exc}", file=sys.stderr)
        return 1

    try:
        storage = connect(config)
    except PyMongoError as exc:
        log.error("failed to init storage", extra=error_attr(exc))
        return 1

    try:
        service = Service(storage, storage, storage, log, table_url=args.table_url)
        Server(service).run(config)
    except (OSError, ValueError) as exc:
        log.error("server failed", extra=error_attr(exc))
        return 1
    finally:
        try:
            storage.close()
        except PyMongoError as exc:
            log.error("failed to disconnect from storage", extra=error_attr(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())