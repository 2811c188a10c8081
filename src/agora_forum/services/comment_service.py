"""Comment engine: submitting, voting on and deleting comments."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from agora_forum.core.settings import settings
from agora_forum.models import Post
from agora_forum.repositories.post_repo import PostStore
from agora_forum.services.errors import (
    Forbidden,
    NotFound,
    OperationFailed,
    ValidationError,
)
from agora_forum.services.identity import Principal
from agora_forum.services.policy import is_author, require_signed_in
from agora_forum.services.post_service import PostView, check_length, commit_or_fail
from agora_forum.services.vote_ledger import VoteLedger

logger = logging.getLogger(__name__)

__all__ = ["CommentService"]


class CommentService:
    """Applies the authorization and vote rules for comments."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.posts = PostStore(session)
        self.ledger = VoteLedger(session)

    def submit_comment(
        self,
        post_id: int,
        principal: Principal | None,
        content: str,
    ) -> PostView:
        """Attach a comment by ``principal`` and return the updated post."""
        principal = require_signed_in(principal)
        check_length("content", content, settings.max_content_length)

        comment = self.posts.append_comment(
            post_id,
            author=principal.username,
            content=content,
        )
        if comment is None:
            raise NotFound("Post does not exist.")

        commit_or_fail(self.session, "submit comment")
        logger.info("User %s commented %d on post %d", principal.username, comment.id, post_id)

        post = self.posts.find_by_id(post_id)
        if post is None:  # pragma: no cover - deleted right after our commit
            raise NotFound("Post does not exist.")
        return PostView(post=post, can_delete=is_author(post.author, principal))

    def vote_comment(self, comment_id: int, username: str, direction: int) -> int:
        """Cast ``username``'s vote and return the comment's new tally.

        Repeating a vote in the same direction changes nothing.
        """
        if not username:
            raise ValidationError("A username is required to vote")

        comment = self.posts.find_comment(comment_id)
        if comment is None:
            raise NotFound(f"Comment {comment_id} does not exist.")
        if self.session.get(Post, comment.post_id) is None:
            raise OperationFailed("Comment voting error")

        try:
            delta = self.ledger.record_or_update(comment_id, username, direction)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        if delta and not self.posts.apply_tally(comment_id, delta):
            self.session.rollback()
            raise OperationFailed("Comment voting error")

        commit_or_fail(self.session, "record vote")
        self.session.refresh(comment)
        logger.debug("Vote on comment %d by %s moved tally by %d", comment_id, username, delta)
        return comment.votes

    def my_vote(self, comment_id: int, principal: Principal | None) -> int:
        """Return the principal's vote direction on a comment (0 if none)."""
        principal = require_signed_in(principal)
        return self.ledger.direction_for(comment_id, principal.username)

    def delete_comment(self, comment_id: int, principal: Principal | None) -> None:
        """Delete a comment the principal authored and purge its votes.

        A missing comment and a comment owned by someone else both raise
        :class:`Forbidden`, so callers cannot probe which comments exist.
        """
        principal = require_signed_in(principal)

        comment = self.posts.find_comment(comment_id)
        if comment is None or not is_author(comment.author, principal):
            logger.info("User %s may not delete comment %d", principal.username, comment_id)
            raise Forbidden("User is not authorized for this action")

        purged = self.ledger.purge(comment_id)
        if not self.posts.remove_comment(comment_id, principal.username):
            self.session.rollback()
            raise Forbidden("User is not authorized for this action")

        commit_or_fail(self.session, "delete comment")
        logger.info("Deleted comment %d (%d votes purged)", comment_id, purged)
