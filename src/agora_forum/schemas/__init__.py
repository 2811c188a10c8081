"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse, CommentVoteCreate, MyVoteResponse
from .common import Message
from .forum import ForumResponse
from .post import PostCreate, PostResponse

__all__ = [
    "CommentCreate", "CommentResponse", "CommentVoteCreate", "MyVoteResponse",
    "ForumResponse",
    "Message",
    "PostCreate", "PostResponse",
]
