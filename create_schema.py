from __future__ import annotations
import argparse
import logging
import sys
from datetime import datetime
from typing import Optional, Sequence
from sqlalchemy import inspect
from flightdb.db import DEFAULT_DB, DATABASE_URL_ENV, drop_db, init_db, make_engine, resolve_database_url
from flightdb.ddl import render_ddl

log = logging.getLogger("create_schema")

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Create the flight delay analysis schema.")
    ap.add_argument(
        "--database",
        default=None,
        help=f"Database URL (default: ${DATABASE_URL_ENV} or {DEFAULT_DB})",
    )
    ap.add_argument("--drop", action="store_true", help="Drop existing tables before creating them")
    ap.add_argument("--sql", action="store_true", help="Print the DDL script instead of touching a database")
    ap.add_argument("--dialect", default="postgresql", help="SQL dialect for --sql (e.g., postgresql, sqlite, mysql)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.sql:
        sys.stdout.write(render_ddl(args.dialect))
        return 0

    database_url = resolve_database_url(args.database)
    engine = make_engine(database_url)
    start = datetime.now()
    log.info("Initialising schema in %s", engine.url.render_as_string(hide_password=True))
    try:
        if args.drop:
            drop_db(engine)
        init_db(engine)
        tables = sorted(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    log.info("Schema ready: %s (%.2fs)", ", ".join(tables), (datetime.now() - start).total_seconds())
    return 0

if __name__ == "__main__":
    sys.exit(main())
