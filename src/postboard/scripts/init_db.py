# src/postboard/scripts/init_db.py
"""Create the schema and seed reference data for local development.

Categories cannot be managed through the API, so this script is the way to
get rows into ``categories``. It can also provision a user and print a bearer
token for that user.
"""
from __future__ import annotations

import argparse
import sys

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from postboard.core.security import create_access_token
from postboard.db.session import SessionLocal, create_tables, drop_tables
from postboard.models import Category, User


def seed_categories(db: Session, names: list[str]) -> int:
    """Insert categories that do not exist yet and return how many were added."""
    existing = set(db.execute(select(Category.name)).scalars())
    added = 0
    for name in names:
        name = name.strip()
        if not name or name in existing:
            continue
        db.add(Category(name=name))
        existing.add(name)
        added += 1
    db.commit()
    return added


def ensure_user(db: Session, name: str) -> User:
    """Return the user called ``name``, creating it if needed."""
    user = db.execute(select(User).where(User.name == name)).scalars().first()
    if user is None:
        user = User(name=name)
        db.add(user)
        db.commit()
        db.refresh(user)
    return user


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialize the Postboard database")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop all tables before recreating them.",
    )
    parser.add_argument(
        "--category",
        action="append",
        default=[],
        help="Category name to seed; may be given several times.",
    )
    parser.add_argument(
        "--user",
        default=None,
        help="Create this user if missing and print an access token for it.",
    )
    args = parser.parse_args()

    try:
        if args.drop_tables:
            drop_tables()
            print("[init_db] dropped all tables")
        create_tables()
        print("[init_db] tables ready")

        db = SessionLocal()
        try:
            if args.category:
                added = seed_categories(db, args.category)
                print(f"[init_db] added {added} categories")
            if args.user:
                user = ensure_user(db, args.user)
                print(f"[init_db] user {user.name} has id {user.id}")
                print(create_access_token(user.id))
        finally:
            db.close()
    except SQLAlchemyError as exc:
        print(f"[init_db] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
