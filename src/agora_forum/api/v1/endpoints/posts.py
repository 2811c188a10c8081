"""Post and comment endpoints nested under a forum."""

from __future__ import annotations

from fastapi import APIRouter, status

from agora_forum.api.v1.dependencies import (
    CommentServiceDep,
    PostServiceDep,
    PrincipalDep,
)
from agora_forum.schemas.comment import CommentCreate, CommentVoteCreate, MyVoteResponse
from agora_forum.schemas.common import Message
from agora_forum.schemas.post import PostResponse
from agora_forum.services import PostView
from agora_forum.services.errors import Unauthorized
from agora_forum.services.policy import is_signed_in
from agora_forum.services.vote_ledger import direction_from_flag

router = APIRouter(prefix="/forums/{forum_id}/posts", tags=["posts"])


def _to_post_response(view: PostView) -> PostResponse:
    response = PostResponse.model_validate(view.post)
    if view.can_delete:
        response.candelete = True
    return response


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    response_model_exclude_none=True,
)
def get_post(
    forum_id: str,
    post_id: int,
    principal: PrincipalDep,
    posts: PostServiceDep,
) -> PostResponse:
    """Get a post by id.

    When the caller is the author the response carries ``candelete``. The
    flag only lets clients offer a delete button; deletion re-checks
    authorship.
    """
    return _to_post_response(posts.get_post(post_id, principal))


@router.delete("/{post_id}", response_model=Message)
def delete_post(
    forum_id: str,
    post_id: int,
    principal: PrincipalDep,
    posts: PostServiceDep,
) -> Message:
    """Delete a post the caller authored."""
    posts.delete_post(forum_id, post_id, principal)
    return Message(detail="Post successfully deleted")


@router.put(
    "/{post_id}/comments",
    response_model=PostResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def submit_comment(
    forum_id: str,
    post_id: int,
    comment_data: CommentCreate,
    principal: PrincipalDep,
    comments: CommentServiceDep,
) -> PostResponse:
    """Comment on a post and return the updated post."""
    view = comments.submit_comment(post_id, principal, comment_data.content)
    return _to_post_response(view)


@router.post("/{post_id}/comments", response_model=Message)
def vote_comment(
    forum_id: str,
    post_id: int,
    vote_data: CommentVoteCreate,
    principal: PrincipalDep,
    comments: CommentServiceDep,
) -> Message:
    """Upvote (``vote=true``) or downvote (``vote=false``) a comment.

    Repeating the same vote is accepted and changes nothing; voting the other
    way reverses the earlier vote.
    """
    if principal is None or not is_signed_in(principal):
        raise Unauthorized("User must be logged in to vote")
    comments.vote_comment(
        vote_data.comment,
        principal.username,
        direction_from_flag(vote_data.vote),
    )
    return Message(detail="Voting successful")


@router.get("/{post_id}/comments/{comment_id}/my-vote", response_model=MyVoteResponse)
def get_my_vote(
    forum_id: str,
    post_id: int,
    comment_id: int,
    principal: PrincipalDep,
    comments: CommentServiceDep,
) -> MyVoteResponse:
    """Get the caller's current vote on a comment."""
    return MyVoteResponse(direction=comments.my_vote(comment_id, principal))


@router.delete("/{post_id}/comments/{comment_id}", response_model=Message)
def delete_comment(
    forum_id: str,
    post_id: int,
    comment_id: int,
    principal: PrincipalDep,
    comments: CommentServiceDep,
) -> Message:
    """Delete a comment the caller authored.

    Missing comments and comments owned by someone else get the same 403.
    """
    comments.delete_comment(comment_id, principal)
    return Message(detail="Comment has been removed")
