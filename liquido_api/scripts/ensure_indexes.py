"""CLI utility to create the unique MongoDB indexes for the Liquido collections.

    liquido-ensure-indexes liquido-test
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from liquido_api.app.config import config
from liquido_api.app.db import close_client, ensure_indexes, find_applied_disabled, get_client, get_db, verify_indexes
from liquido_api.app.errors import IndexCreationError
from liquido_api.app.indexes import DISABLED_INDEXES, UNIQUE_INDEXES

logger = logging.getLogger("liquido_api.scripts.ensure_indexes")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create unique indexes on the Liquido collections.")
    p.add_argument("database", nargs="?", default=None, help=f"Database name (default: {config.default_db_name})")
    p.add_argument("--uri", default=None, help="MongoDB URI (default: env MONGO_URI)")
    p.add_argument("--dry-run", action="store_true", help="List the declared indexes without creating them")
    p.add_argument("--verify", action="store_true", help="Check the index catalog after creating the indexes")
    p.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: env LOG_LEVEL or INFO)",
    )
    return p.parse_args(argv)


def list_declared() -> None:
    for spec in UNIQUE_INDEXES:
        logger.info("Declared unique index %s on %s", spec.name, spec.collection)
    for spec in DISABLED_INDEXES:
        logger.info("Disabled unique index %s on %s: %s", spec.name, spec.collection, spec.reason)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.dry_run:
        list_declared()
        return 0

    get_client(args.uri)
    try:
        db = get_db(args.database)
        try:
            created = ensure_indexes(db)
        except IndexCreationError as exc:
            logger.error(
                "Index creation rejected on %s %s (code=%s): %s",
                exc.spec.collection,
                list(exc.spec.keys),
                exc.code,
                exc.__cause__,
            )
            return 1
        for coll, names in created.items():
            for name in names:
                print(f"Ensured index on {coll}: {name} options={{'unique': True}}")

        if args.verify:
            missing = verify_indexes(db)
            applied_disabled = find_applied_disabled(db)
            if missing or applied_disabled:
                logger.error(
                    "Index catalog check failed: %d missing, %d disabled present",
                    len(missing),
                    len(applied_disabled),
                )
                return 1
            logger.info("Index catalog of %s matches the declared unique indexes", db.name)
    finally:
        close_client()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
