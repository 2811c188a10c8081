"""Post engine: listing, creating, reading and deleting posts in a forum."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agora_forum.core.settings import settings
from agora_forum.models import Forum, Post
from agora_forum.repositories.forum_repo import ForumStore
from agora_forum.repositories.post_repo import PostStore
from agora_forum.services.errors import (
    AccountResolutionError,
    Forbidden,
    NotFound,
    OperationFailed,
    ValidationError,
)
from agora_forum.services.identity import AccountDirectory, Principal
from agora_forum.services.ids import PostIdGenerator, get_post_id_generator
from agora_forum.services.policy import is_author, require_signed_in

logger = logging.getLogger(__name__)

__all__ = ["PostView", "PostService", "commit_or_fail", "check_length"]


@dataclass(frozen=True)
class PostView:
    """A post as seen by a particular viewer.

    ``can_delete`` is advisory for the client. :meth:`PostService.delete_post`
    re-checks authorship and never consults it.
    """

    post: Post
    can_delete: bool = False


def commit_or_fail(session: Session, action: str) -> None:
    """Commit the unit of work or roll back and raise :class:`OperationFailed`."""
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Commit failed while trying to %s", action)
        raise OperationFailed(f"Unable to {action}") from exc


def check_length(field: str, value: str, limit: int) -> str:
    """Return ``value`` if it is non-empty and at most ``limit`` characters."""
    if not value:
        raise ValidationError(f"{field} must not be empty")
    if len(value) > limit:
        raise ValidationError(f"{field} must be at most {limit} characters")
    return value


class PostService:
    """Applies the authorization rules for posts on top of the stores."""

    def __init__(
        self,
        session: Session,
        *,
        id_generator: PostIdGenerator | None = None,
    ) -> None:
        self.session = session
        self.forums = ForumStore(session)
        self.posts = PostStore(session)
        self.accounts = AccountDirectory(session)
        self.id_generator = id_generator or get_post_id_generator()

    def get_forum(self, forum_id: str) -> Forum:
        """Return a forum or raise :class:`NotFound`."""
        forum = self.forums.find_by_id(forum_id)
        if forum is None:
            raise NotFound(f"Forum {forum_id} not found.")
        return forum

    def list_posts(self, forum_id: str) -> list[Post]:
        """Return the forum's posts in insertion order."""
        forum = self.get_forum(forum_id)
        return list(forum.posts)

    def create_post(
        self,
        forum_id: str,
        title: str,
        content: str,
        principal: Principal | None,
    ) -> Forum:
        """Create a post authored by ``principal`` and return the updated forum.

        Raises:
            NotFound: The forum does not exist, or vanished before the append.
            Unauthorized: No one is signed in.
            ValidationError: The title or content is empty or too long.
            AccountResolutionError: The signed-in username has no account.
            OperationFailed: The append could not be committed.
        """
        self.get_forum(forum_id)
        principal = require_signed_in(principal)
        check_length("title", title, settings.max_title_length)
        check_length("content", content, settings.max_content_length)

        account = self.accounts.resolve(principal.username)
        if account is None:
            logger.warning("Rejected post by unknown account %r", principal.username)
            raise AccountResolutionError("User does not exist")

        post_id = self.id_generator.next_id(floor=self.forums.max_post_id())
        forum = self.forums.append_post(
            forum_id,
            post_id=post_id,
            title=title,
            content=content,
            author=account.username,
        )
        if forum is None:
            self.session.rollback()
            raise NotFound(f"Forum {forum_id} not found.")

        commit_or_fail(self.session, "update forum posts")
        logger.info("Created post %d in forum %s by %s", post_id, forum_id, account.username)
        return forum

    def get_post(self, post_id: int, principal: Principal | None = None) -> PostView:
        """Resolve a post by id, flagging it deletable for its author."""
        post = self.posts.find_by_id(post_id)
        if post is None:
            raise NotFound("Post does not exist.")
        return PostView(post=post, can_delete=is_author(post.author, principal))

    def delete_post(self, forum_id: str, post_id: int, principal: Principal | None) -> None:
        """Delete a post the principal authored, along with its comments and votes.

        Raises:
            Unauthorized: No one is signed in.
            NotFound: The post is not in this forum, or a racing delete won.
            Forbidden: The principal is not the post's author.
        """
        principal = require_signed_in(principal)

        post = self.posts.find_by_id(post_id)
        if post is None or post.forum_id != forum_id:
            raise NotFound("Post does not exist.")
        if not is_author(post.author, principal):
            logger.info("User %s may not delete post %d", principal.username, post_id)
            raise Forbidden()

        if not self.forums.remove_post(forum_id, post_id, principal.username):
            self.session.rollback()
            raise NotFound("Post does not exist.")

        commit_or_fail(self.session, "delete post")
        logger.info("Deleted post %d from forum %s", post_id, forum_id)
