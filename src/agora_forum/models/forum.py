"""SQLAlchemy model for forums."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agora_forum.db.session import Base

if TYPE_CHECKING:
    from .post import Post


class Forum(Base):
    """Aggregate root owning an ordered collection of posts."""

    __tablename__ = "forum"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Post ids are monotonic, so ordering by id is insertion order.
    posts: Mapped[list[Post]] = relationship(
        "Post",
        back_populates="forum",
        order_by="Post.id",
        cascade="all, delete-orphan",
    )
