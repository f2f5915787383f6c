#!/usr/bin/env python3
"""
Build the dashboard JSON for one reader.

Usage:
    python create_dashboard_json.py <owner> [year] [output_path]
"""

import logging
import sys
from datetime import date

from readinglog import ReadingLog, Settings, create_dashboard_json
from readinglog.config import LOG_FORMAT

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def main(argv):
    if len(argv) < 2:
        print(__doc__)
        return 2

    owner = argv[1]
    year = int(argv[2]) if len(argv) > 2 else date.today().year
    output_path = argv[3] if len(argv) > 3 else None

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    reading_log = ReadingLog(settings.build_store(), settings=settings)
    dashboard = reading_log.dashboard(owner, year)

    print("📊 READING DASHBOARD")
    print("=" * 60)
    print_summary(dashboard)

    json_path = create_dashboard_json(dashboard, output_path)
    print()
    print(f"📄 Dashboard JSON saved to: {json_path}")
    return 0


def print_summary(dashboard):
    """Print the headline numbers"""
    lifetime = dashboard.lifetime
    recap = dashboard.recap
    progress = dashboard.goal_progress

    print(f"Books read: {lifetime.total_books_read}")
    print(f"Pages read: {lifetime.total_pages:,}")
    if lifetime.average_rating is not None:
        print(f"Average rating: {lifetime.average_rating:.1f}/10")

    print(f"\n📅 {recap.year}: {recap.total_books} books, {recap.total_pages:,} pages")
    if recap.peak_month is not None:
        print(f"Biggest month: {MONTHS[recap.peak_month]}")
    if recap.top_book:
        print(f"Book of the year: {recap.top_book.title} ({recap.top_book.rating}/10)")

    print(f"\n🎯 Goal: {progress.books_read}/{progress.books_target} books, "
          f"{progress.pages_read:,}/{progress.pages_target:,} pages")
    if dashboard.goal_reached_now:
        print("🎉 You hit your reading goal!")


if __name__ == "__main__":
    sys.exit(main(sys.argv))
