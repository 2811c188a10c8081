"""SQLAlchemy models for the Agora forum service."""

from .account import Account
from .comment import Comment
from .forum import Forum
from .post import Post
from .vote import CommentVote

__all__ = [
    "Account",
    "Comment",
    "CommentVote",
    "Forum",
    "Post",
]
