"""Authorization predicates shared by the post and comment engines."""
from __future__ import annotations

from agora_forum.services.errors import Unauthorized
from agora_forum.services.identity import Principal

__all__ = ["is_signed_in", "is_author", "require_signed_in"]


def is_signed_in(principal: Principal | None) -> bool:
    """Return True when the request carries a usable identity."""
    return principal is not None and bool(principal.username)


def is_author(author: str, principal: Principal | None) -> bool:
    """Return True when ``principal`` is the author recorded on the content."""
    return (
        principal is not None
        and bool(principal.username)
        and principal.username == author
    )


def require_signed_in(principal: Principal | None) -> Principal:
    """Return ``principal`` or raise :class:`Unauthorized`."""
    if principal is None or not principal.username:
        raise Unauthorized()
    return principal
