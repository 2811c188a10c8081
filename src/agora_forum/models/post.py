"""SQLAlchemy model for posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agora_forum.db.session import Base

if TYPE_CHECKING:
    from .comment import Comment
    from .forum import Forum


class Post(Base):
    """Titled piece of content owned by exactly one forum."""

    __tablename__ = "post"
    __table_args__ = (Index("ix_post_forum_id", "forum_id"),)

    # Assigned by PostIdGenerator, never by the database.
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    forum_id: Mapped[str] = mapped_column(
        Text,
        ForeignKey("forum.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Denormalized username, not a foreign key.
    author: Mapped[str] = mapped_column(Text, nullable=False)

    forum: Mapped[Forum] = relationship("Forum", back_populates="posts")
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        order_by="Comment.id",
        cascade="all, delete-orphan",
    )
