#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the menu catalog schema and seeds it when empty.
"""

import logging
import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import init_database, seed_menu_items, SessionLocal

logger = logging.getLogger("quickbite.scripts.init_db")


def main() -> int:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
    try:
        init_database()
        with SessionLocal() as db:
            inserted = seed_menu_items(db)
    except Exception:
        logger.exception("Database initialization failed")
        return 1

    logger.info(f"Database ready inserted={inserted}")
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("QuickBite Database Initialization (Standalone)")
    print("=" * 60 + "\n")

    exit_code = main()

    print("\n" + "=" * 60)
    print("SUCCESS! The menu catalog is ready." if exit_code == 0 else "FAILED! Check the errors above.")
    print("=" * 60 + "\n")

    sys.exit(exit_code)
