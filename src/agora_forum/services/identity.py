"""Identity primitives consumed by the engines."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from agora_forum.models import Account

__all__ = ["Principal", "AccountDirectory"]


@dataclass(frozen=True)
class Principal:
    """Authenticated identity associated with a request."""

    username: str


class AccountDirectory:
    """Looks up accounts to confirm a username is real."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def resolve(self, username: str) -> Account | None:
        """Return the account for ``username`` or None."""
        if not username:
            return None
        return self.session.get(Account, username)
