"""Shared API dependencies for identity and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from agora_forum.core.security import TokenError, decode_access_token
from agora_forum.db.session import get_db
from agora_forum.services import CommentService, PostService, Principal

# Anonymous requests are allowed through; each operation decides whether it
# needs an identity.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Principal | None:
    """Resolve the request's identity from its bearer token.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent

    Returns:
        The signed-in principal, or None for anonymous requests

    Raises:
        HTTPException: If a token was sent but cannot be validated
    """
    if credentials is None:
        return None
    try:
        username = decode_access_token(credentials.credentials)
    except TokenError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err
    return Principal(username=username)


def get_post_service(db: SessionDep) -> PostService:
    """Return a post engine bound to the request's session."""
    return PostService(db)


def get_comment_service(db: SessionDep) -> CommentService:
    """Return a comment engine bound to the request's session."""
    return CommentService(db)


# Type aliases for route signatures
PrincipalDep = Annotated[Principal | None, Depends(get_current_principal)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
