"""Forum-level endpoints: reading a forum and listing/creating its posts."""

from __future__ import annotations

from fastapi import APIRouter, status

from agora_forum.api.v1.dependencies import PostServiceDep, PrincipalDep
from agora_forum.models import Forum, Post
from agora_forum.schemas.forum import ForumResponse
from agora_forum.schemas.post import PostCreate, PostResponse

router = APIRouter(prefix="/forums", tags=["forums"])


@router.get(
    "/{forum_id}",
    response_model=ForumResponse,
    response_model_exclude_none=True,
)
def get_forum(forum_id: str, posts: PostServiceDep) -> Forum:
    """Get a forum together with its posts."""
    return posts.get_forum(forum_id)


@router.get(
    "/{forum_id}/posts",
    response_model=list[PostResponse],
    response_model_exclude_none=True,
)
def list_posts(forum_id: str, posts: PostServiceDep) -> list[Post]:
    """Retrieve every post in a forum, oldest first.

    Raises:
        NotFound: If the forum does not exist
    """
    return posts.list_posts(forum_id)


@router.put(
    "/{forum_id}/posts",
    response_model=ForumResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_post(
    forum_id: str,
    post_data: PostCreate,
    principal: PrincipalDep,
    posts: PostServiceDep,
) -> Forum:
    """Create a post in a forum and return the updated forum.

    Args:
        forum_id: Forum receiving the post
        post_data: Title and content of the new post
        principal: Signed-in author, if any
        posts: Post engine

    Returns:
        The forum including the new post

    Raises:
        NotFound: If the forum does not exist
        Unauthorized: If the caller is not signed in
        AccountResolutionError: If the caller's account does not exist
    """
    return posts.create_post(forum_id, post_data.title, post_data.content, principal)
