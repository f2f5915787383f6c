#!/usr/bin/env python3
"""
Import a Goodreads library export into a reading log collection.

Usage:
    python import_goodreads.py <owner> <goodreads_export.csv>

Storage comes from the environment: DATA_BUCKET for S3, otherwise local
JSON files under STORE_PATH.
"""

import logging
import sys

from readinglog import ReadingLog, Settings, ParseError, PersistenceError
from readinglog.config import LOG_FORMAT


def main(argv):
    if len(argv) != 3:
        print(__doc__)
        return 2

    owner, csv_path = argv[1], argv[2]

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    print("📚 GOODREADS IMPORT")
    print("=" * 60)

    reading_log = ReadingLog(settings.build_store(), settings=settings)

    try:
        result = reading_log.import_goodreads_file(owner, csv_path)
    except FileNotFoundError:
        print(f"❌ CSV file not found: {csv_path}")
        return 1
    except ParseError as e:
        print(f"❌ Couldn't parse that file: {e}")
        return 1
    except PersistenceError as e:
        print(f"❌ Import failed, nothing was saved: {e}")
        return 1

    print(f"✅ Added {result.added} books")
    if result.skipped:
        print(f"⏭️  Skipped {result.skipped} books already in the collection")
    print(f"📖 Collection now holds {len(reading_log.snapshot(owner))} books")
    logging.getLogger(__name__).debug(f"Import summary: {result.get_summary()}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
