"""Data access helpers for posts and their comments."""
from __future__ import annotations

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from agora_forum.models import Comment, Post

__all__ = ["PostStore"]


class PostStore:
    """Resolves posts by id regardless of forum and persists comment changes."""

    def __init__(self, session: Session) -> None:
        """Initialize the store with a SQLAlchemy session."""
        self.session = session

    def find_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def find_comment(self, comment_id: int) -> Comment | None:
        """Return a comment by identifier."""
        return self.session.get(Comment, comment_id)

    def append_comment(self, post_id: int, *, author: str, content: str) -> Comment | None:
        """Attach a new comment with a zero tally, or return None if the post is gone."""
        post = self.find_by_id(post_id)
        if post is None:
            return None
        comment = Comment(post_id=post.id, author=author, content=content, votes=0)
        self.session.add(comment)
        self.session.flush()
        return comment

    def apply_tally(self, comment_id: int, delta: int) -> bool:
        """Shift a comment's tally by ``delta``; False if the comment vanished."""
        result = self.session.execute(
            update(Comment)
            .where(Comment.id == comment_id)
            .values(votes=Comment.votes + delta)
            .execution_options(synchronize_session="fetch")
        )
        return bool(result.rowcount)

    def remove_comment(self, comment_id: int, author: str) -> bool:
        """Delete a comment only while ``author`` still owns it."""
        result = self.session.execute(
            delete(Comment)
            .where(Comment.id == comment_id, Comment.author == author)
            .execution_options(synchronize_session="fetch")
        )
        return bool(result.rowcount)
