#!/usr/bin/env python3
"""
Clear the persisted high score.

Sets the stored high score back to 0 and forgets its owner. Normal play
never does this; it is an administrative reset.

Usage:
    python backend/cli/clear_high_score.py [--confirm] [--db PATH]
"""

import os
import sys
import argparse
import logging

# Add parent directory to path to import project modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from data_access import SqliteKeyValueStore  # noqa: E402
from database import get_database_path  # noqa: E402
from domain.scoreboard import Scoreboard  # noqa: E402


def clear_high_score(confirm: bool = False, db_path: str = None) -> bool:
    """
    Reset the stored high score.

    Args:
        confirm: If True, skip confirmation prompt
        db_path: SQLite file to modify; defaults to get_database_path()

    Returns:
        True if the high score was cleared, False if cancelled
    """
    db_path = db_path or get_database_path()
    store = SqliteKeyValueStore(db_path)
    scoreboard = Scoreboard(store)

    if not confirm:
        print("=" * 70)
        print("HIGH SCORE RESET")
        print("=" * 70)
        print(f"Database path: {db_path}")
        owner = f" ({scoreboard.high_score_owner})" if scoreboard.high_score_owner else ""
        print(f"Current high score: {scoreboard.high_score}{owner}")
        print("=" * 70)

        response = input("\nType 'CLEAR' to confirm: ")

        if response != 'CLEAR':
            print("Reset cancelled")
            return False

    previous = scoreboard.high_score
    scoreboard.clear_high_score()
    print(f"High score cleared (was {previous})")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Clear the persisted snake high score")
    parser.add_argument('--confirm', action='store_true', help='Skip confirmation prompt')
    parser.add_argument('--db', type=str, default=None, help='SQLite file holding the high score')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    success = clear_high_score(confirm=args.confirm, db_path=args.db)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
