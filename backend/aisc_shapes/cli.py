"""Command-line loader: read the shapes CSV, report, export and seed."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from sqlalchemy import create_engine

from .catalog import load_catalog
from .config import get_settings
from .errors import ShapeError
from .logging_config import setup_logging
from .profiles import SHAPE_TYPES
from .repository import ShapeRepository
from .sql_export import write_sql_files
from .tables import create_tables

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="aisc-shapes",
        description="Load the AISC shapes database CSV into family records.",
    )
    parser.add_argument(
        "csv",
        nargs="?",
        default=settings.shapes_csv,
        help=f"shapes database CSV (default: {settings.shapes_csv})",
    )
    parser.add_argument("--sql-dir", help="write one <table>.sql seed script per family here")
    parser.add_argument(
        "--seed",
        action="store_true",
        help="create tables and insert every shape; families already stored are skipped",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy URL used with --seed",
    )
    parser.add_argument("--encoding", default=settings.csv_encoding)
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, json_output=get_settings().log_json, stream=sys.stderr)

    try:
        catalog = load_catalog(args.csv, encoding=args.encoding)
    except (OSError, ShapeError) as exc:
        # Traceback only at DEBUG.
        logger.error(
            "Could not load %s: %s",
            args.csv,
            exc,
            exc_info=logger.isEnabledFor(logging.DEBUG),
        )
        return 1

    for family, shapes in catalog.items():
        print(f"{family.value:<32} {len(shapes):>5}")

    if args.sql_dir:
        write_sql_files(catalog, args.sql_dir)

    if args.seed:
        engine = create_engine(args.database_url)
        create_tables(engine)
        total = 0
        for family, shapes in catalog.items():
            repo = ShapeRepository(engine, SHAPE_TYPES[family])
            stored = repo.count()
            if stored:
                logger.info("Skipping %s: table already has %d rows", repo.table.name, stored)
                continue
            total += repo.add_all(shapes)
        logger.info("Seeded %d shapes", total)
        engine.dispose()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
