"""SQLAlchemy model for comments attached to posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agora_forum.db.session import Base

if TYPE_CHECKING:
    from .post import Post


class Comment(Base):
    """Flat reply attached to a single post, carrying a net vote tally."""

    __tablename__ = "comment"
    __table_args__ = (
        Index("ix_comment_post_id", "post_id"),
        # Never reuse ids of deleted comments.
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    author: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Upvotes minus downvotes.
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    post: Mapped[Post] = relationship("Post", back_populates="comments")
