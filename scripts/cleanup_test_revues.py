#!/usr/bin/env python3
"""Cleanup script to delete revues created by the CRUD checks.

This script:
1. Lists all revues visible to the test account
2. Selects those titled "Test Revue <hex>" (or --prefix)
3. Asks for user confirmation (unless --force is passed)
4. Deletes them

Usage:
    python scripts/cleanup_test_revues.py           # Interactive mode
    python scripts/cleanup_test_revues.py --force   # Skip confirmation
    python scripts/cleanup_test_revues.py --dry-run # List revues without deleting
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.revue_client.api_wrapper import RevueAPI
from src.revue_client.auth import Authenticator
from src.revue_client.config import load_config
from src.revue_client.errors import RevueCraftersError
from src.scenario.cleanup import delete_revues, find_test_revues
from src.scenario.steps import TITLE_PREFIX

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def confirm_deletion(count: int, base_url: str) -> bool:
    """Ask user for confirmation before deleting."""
    print()
    print("=" * 60)
    print(f"⚠️  WARNING: This will DELETE {count} revue(s) from {base_url}")
    print("=" * 60)
    print()

    while True:
        response = input("Are you sure you want to continue? (yes/no): ").strip().lower()
        if response in ('yes', 'y'):
            return True
        elif response in ('no', 'n'):
            return False
        else:
            print("Please enter 'yes' or 'no'")


def main():
    parser = argparse.ArgumentParser(
        description="Delete revues left behind by the RevueCrafters CRUD checks"
    )
    parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Skip confirmation prompt'
    )
    parser.add_argument(
        '--dry-run', '-n',
        action='store_true',
        help='List revues without deleting them'
    )
    parser.add_argument(
        '--prefix',
        default=TITLE_PREFIX,
        help=f"Title prefix to match (default: '{TITLE_PREFIX}')"
    )

    args = parser.parse_args()

    try:
        config = load_config()
        token = Authenticator().fetch_access_token(config)
    except RevueCraftersError as e:
        logger.error(f"Failed to authenticate: {e}")
        logger.error("Check REVUE_EMAIL / REVUE_PASSWORD in your .env file")
        return 1

    with RevueAPI(config, token) as api:
        try:
            revues = find_test_revues(api, args.prefix)
        except RevueCraftersError as e:
            logger.error(f"Failed to list revues: {e}")
            return 1

        if not revues:
            logger.info("No test revues found.")
            return 0

        print()
        print(f"Revues to delete ({len(revues)}):")
        print("-" * 40)
        for revue in revues:
            print(f"  - {revue.revue_id}: {revue.title}")
        print("-" * 40)

        if args.dry_run:
            logger.info("DRY RUN mode - no revues will be deleted")
            deleted, _ = delete_revues(api, revues, dry_run=True)
            logger.info(f"Would delete {deleted} revue(s)")
            return 0

        if not args.force and not confirm_deletion(len(revues), config.base_url):
            logger.info("Deletion cancelled by user")
            return 0

        deleted, failed = delete_revues(api, revues)

    print()
    print("=" * 60)
    print("Cleanup Summary:")
    print(f"  - Revues deleted: {deleted}")
    print(f"  - Revues failed: {failed}")
    print("=" * 60)

    return 0 if failed == 0 else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nCancelled by user")
        sys.exit(1)
