"""Storefront management CLI.

Usage:
    python src/manage.py setup-db   # Create tables for SQL providers
    python src/manage.py drop-db    # Drop tables for SQL providers
    python src/manage.py seed       # Load the demo catalogue and admin account

With the default in-memory provider ``seed`` only affects this process;
point the domain at a database before seeding for real.
"""

import argparse
import sys


def _domain():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_databases():
    from storefront.utils.db import setup_db

    domain = _domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_databases():
    from storefront.utils.db import drop_db

    domain = _domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def seed_data():
    from storefront.seed import seed

    domain = _domain()
    with domain.domain_context():
        created = seed()
    for kind, count in created.items():
        print(f"  {kind}: {count} created")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load demo categories, products, banners and the admin user")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "seed":
        seed_data()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
