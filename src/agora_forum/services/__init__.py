"""Business logic services for the Agora forum service."""

from .comment_service import CommentService
from .identity import AccountDirectory, Principal
from .post_service import PostService, PostView
from .vote_ledger import VoteLedger

__all__ = [
    "AccountDirectory",
    "CommentService",
    "PostService",
    "PostView",
    "Principal",
    "VoteLedger",
]
