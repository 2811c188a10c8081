"""Error kinds raised by the post and comment engines.

Each error carries the HTTP status it maps to at the API boundary, so the
application-level exception handler in :mod:`agora_forum.main` is a single
lookup rather than a chain of special cases.
"""

from __future__ import annotations

from fastapi import status


class ForumError(RuntimeError):
    """Base exception for every refused or failed forum operation."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Forum operation failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthorized(ForumError):
    """No identity is attached to the request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "You must be signed in to perform this action"


class Forbidden(ForumError):
    """An identity is present but has no rights over the target."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You are not authorized for this action"


class NotFound(ForumError):
    """The target entity does not exist (or no longer exists)."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ValidationError(ForumError):
    """Malformed or mistyped input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class OperationFailed(ForumError):
    """A storage write could not be committed."""

    default_detail = "Operation could not be completed"


class AccountResolutionError(ForumError):
    """The signed-in username does not map to an existing account.

    Kept apart from :class:`Unauthorized` so callers can tell "not signed in"
    from "signed in as someone who does not exist".
    """

    default_detail = "User does not exist"


class InternalError(ForumError):
    """Unexpected failure raised by the store."""

    default_detail = "Internal server error"
