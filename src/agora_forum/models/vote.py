"""Models capturing voting interactions on comments."""

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from agora_forum.db.session import Base


class CommentVote(Base):
    """Per-user vote on a comment."""

    __tablename__ = "comment_vote"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_comment_vote_direction"),
        Index("ix_comment_vote_comment_id", "comment_id"),
    )

    comment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comment.id", ondelete="CASCADE"),
        primary_key=True,
    )

    username: Mapped[str] = mapped_column(Text, primary_key=True)

    # Composite primary key prevents duplicate votes from the same user.

    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
