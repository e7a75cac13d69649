from __future__ import annotations

import argparse
import sys

from hottext.errors import LoaderError
from hottext.lines.fixtures.lines import LINES
from hottext.lines.loaders import load_json, load_toml
from hottext.lines.sqlite_line_store import SQLiteLineStore
from hottext.utils.logging import line_key_context, setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed a SQLite line database.")
    parser.add_argument("--db", required=True, help="Path to sqlite db file, e.g. data/lines.db")
    parser.add_argument("--json", action="append", default=[], help="JSON line file to import (repeatable)")
    parser.add_argument("--toml", action="append", default=[], help="TOML line file to import (repeatable)")
    parser.add_argument("--log-level", default=None, help="Overrides HOTTEXT_LOG_LEVEL")
    args = parser.parse_args(argv)

    logger = setup_logging(args.log_level)

    sources = [(load_json, p) for p in args.json] + [(load_toml, p) for p in args.toml]

    store = SQLiteLineStore(args.db)
    written = 0
    try:
        if not sources:
            logger.info(f"No files given; seeding {len(LINES)} bundled keys")
            written += _seed(store, LINES, logger)
        for loader, path in sources:
            logger.info(f"Importing {path}")
            written += _seed(store, loader(path), logger)
    except LoaderError as e:
        logger.error(f"Seeding aborted: {e}")
        return 1

    print(f"Seeded {written} lines into {args.db}")
    return 0


def _seed(store: SQLiteLineStore, line_pairs, logger) -> int:
    written = 0
    for key, lines in line_pairs.items():
        with line_key_context(key):
            added = store.upsert_lines(key, lines)
            logger.debug(f"upserted | new_rows={added}")
        written += added
    return written


if __name__ == "__main__":
    sys.exit(main())
