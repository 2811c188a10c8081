# src/agora_forum/scripts/tokens.py
"""
Maintenance helper that issues bearer tokens for local use.

Account registration and login live in another service. For development and
smoke testing this script can:
1. Create the database tables
2. Ensure an account (and optionally a forum) exists
3. Print a bearer token for that account
"""

import argparse

from sqlalchemy.orm import Session

from agora_forum.core.security import create_access_token
from agora_forum.db.session import SessionLocal, create_tables
from agora_forum.models import Account
from agora_forum.repositories.forum_repo import ForumStore


def ensure_account(db: Session, username: str, display_name: str | None = None) -> Account:
    """Return the account for ``username``, creating it if needed.

    Args:
        db: Database session
        username: Account username
        display_name: Optional display name for a new account
    """
    account = db.get(Account, username)
    if account is None:
        account = Account(username=username, display_name=display_name)
        db.add(account)
        db.commit()
        print(f"Created account {username}")
    return account


def ensure_forum(db: Session, forum_id: str, name: str | None = None) -> None:
    """Create the forum ``forum_id`` unless it already exists."""
    store = ForumStore(db)
    if store.find_by_id(forum_id) is None:
        store.create(forum_id, name)
        db.commit()
        print(f"Created forum {forum_id}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Issue a bearer token for a forum account.")
    parser.add_argument("username", help="Account username (token subject)")
    parser.add_argument("--display-name", default=None)
    parser.add_argument("--forum", default=None, help="Also ensure this forum id exists")
    parser.add_argument("--create-tables", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.create_tables:
        create_tables()

    db = SessionLocal()
    try:
        ensure_account(db, args.username, args.display_name)
        if args.forum:
            ensure_forum(db, args.forum)
    finally:
        db.close()

    print(create_access_token(args.username))


if __name__ == "__main__":
    main()
