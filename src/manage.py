"""Productify database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from productify.domain import productify
    from productify.utils.db import setup_db

    print("Initializing productify domain...")
    productify.init()
    print("Creating productify database schema...")
    setup_db(productify)
    print("Done.")


def drop_database():
    from productify.domain import productify
    from productify.utils.db import drop_db

    print("Initializing productify domain...")
    productify.init()
    print("Dropping productify database schema...")
    drop_db(productify)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Productify database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
