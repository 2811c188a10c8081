"""Data access helpers for forums and the posts they own."""
from __future__ import annotations

from sqlalchemy import BigInteger, Text, delete, func, insert, literal, select
from sqlalchemy.orm import Session

from agora_forum.models import Comment, CommentVote, Forum, Post

__all__ = ["ForumStore"]


class ForumStore:
    """Thin wrapper around database access for forum aggregates.

    Mutations are staged on the session; the engines own commit/rollback.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the store with a SQLAlchemy session."""
        self.session = session

    def find_by_id(self, forum_id: str) -> Forum | None:
        """Return a forum by identifier."""
        return self.session.get(Forum, forum_id)

    def create(self, forum_id: str, name: str | None = None) -> Forum:
        """Insert a new, empty forum."""
        forum = Forum(id=forum_id, name=name)
        self.session.add(forum)
        self.session.flush()
        return forum

    def max_post_id(self) -> int:
        """Return the highest post id ever persisted, or 0."""
        return self.session.execute(select(func.max(Post.id))).scalar() or 0

    def append_post(
        self,
        forum_id: str,
        *,
        post_id: int,
        title: str,
        content: str,
        author: str,
    ) -> Forum | None:
        """Append a post to the forum and return the updated forum.

        The insert selects from the forum row itself, so a forum removed by a
        racing request yields zero inserted rows and None, never an orphan.
        """
        source = select(
            literal(post_id, BigInteger),
            Forum.id,
            literal(title, Text),
            literal(content, Text),
            literal(author, Text),
        ).where(Forum.id == forum_id)
        result = self.session.execute(
            insert(Post.__table__).from_select(
                ["id", "forum_id", "title", "content", "author"],
                source,
            )
        )
        if not result.rowcount:
            return None

        forum = self.session.get(Forum, forum_id)
        if forum is None:  # pragma: no cover - removed inside our own transaction
            return None
        self.session.refresh(forum)
        return forum

    def remove_post(self, forum_id: str, post_id: int, author: str) -> bool:
        """Delete a post together with its comments and their votes.

        The post row is deleted only while it still belongs to ``forum_id``
        and ``author``; False means nothing matched and nothing changed.
        """
        result = self.session.execute(
            delete(Post)
            .where(
                Post.id == post_id,
                Post.forum_id == forum_id,
                Post.author == author,
            )
            .execution_options(synchronize_session="fetch")
        )
        if not result.rowcount:
            return False

        comment_ids = select(Comment.id).where(Comment.post_id == post_id)
        self.session.execute(
            delete(CommentVote)
            .where(CommentVote.comment_id.in_(comment_ids))
            .execution_options(synchronize_session=False)
        )
        self.session.execute(
            delete(Comment)
            .where(Comment.post_id == post_id)
            .execution_options(synchronize_session=False)
        )
        return True
