# WORKFLOW: Seed the currency_day table from the published exchange rate spreadsheet.
# Used by: Scheduled jobs, initial setup
# Functions:
# 1. load_content() - Read a local workbook or download the published one
# 2. main() - Parse arguments, run the pipeline, report and set the exit code
#
# Seed flow: Database check -> Download -> ETL pipeline -> "Seeded with N rows." (exit 0)
# Any fatal error is printed and the process exits with 1.

"""
Seed script for the currency day store.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.config import settings  # noqa: E402
from core.logging import configure_logging  # noqa: E402
from db.session import check_db_connection, get_db, init_db  # noqa: E402
from etl.download import download_file  # noqa: E402
from etl.pipeline import run_seed  # noqa: E402

logger = logging.getLogger(__name__)


def load_content(file_path: Optional[str], url: Optional[str]) -> bytes:
    """
    Get the workbook bytes.

    Args:
        file_path: Local workbook, takes precedence over the URL
        url: Workbook URL, defaults to settings.source_url

    Returns:
        Workbook content
    """
    if file_path:
        logger.info(f"Reading file {file_path}")
        return Path(file_path).read_bytes()

    return download_file(url=url)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main seed function.
    """
    parser = argparse.ArgumentParser(description='Seed daily exchange rates from the published spreadsheet')
    parser.add_argument('--url', help='Spreadsheet URL (defaults to SOURCE_URL)')
    parser.add_argument('--file', help='Read a local workbook instead of downloading')
    parser.add_argument('--init-db', action='store_true', help='Create tables before seeding')
    parser.add_argument('--skip-rows', type=int, default=None,
                        help=f'Header rows to skip (default {settings.header_skip_rows})')
    parser.add_argument('--log-level', default=None, help='Log level (defaults to LOG_LEVEL)')

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not check_db_connection():
        print(f"Cannot connect to database at {settings.database_url}")
        return 1

    try:
        if args.init_db:
            init_db()

        content = load_content(args.file, args.url)

        with next(get_db()) as db:
            inserted = run_seed(db, content, start_row=args.skip_rows)

    except Exception as e:
        logger.error(f"Seed failed: {e}")
        print(e)
        return 1

    print(f"Seeded with {inserted} rows.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
