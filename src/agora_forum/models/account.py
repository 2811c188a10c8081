"""SQLAlchemy model for forum accounts."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from agora_forum.db.session import Base


class Account(Base):
    """Registered account, keyed by its unique username.

    Registration and login live outside this service; the table is consulted
    only to confirm that a token's subject names a real account.
    """

    __tablename__ = "account"

    username: Mapped[str] = mapped_column(Text, primary_key=True)
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
