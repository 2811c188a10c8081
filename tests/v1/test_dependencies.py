"""Tests for API dependencies module."""

import pytest
from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from agora_forum.api.v1.dependencies import get_current_principal
from agora_forum.core.security import TokenError, create_access_token, decode_access_token
from agora_forum.services import Principal


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_token_round_trip() -> None:
    assert decode_access_token(create_access_token("alice")) == "alice"


def test_decode_garbage_token() -> None:
    with pytest.raises(TokenError):
        decode_access_token("garbage")


def test_anonymous_request_has_no_principal() -> None:
    assert get_current_principal(None) is None


def test_valid_token_yields_principal() -> None:
    principal = get_current_principal(_credentials(create_access_token("bob")))
    assert principal == Principal(username="bob")


def test_invalid_token_rejected() -> None:
    with pytest.raises(HTTPException) as exc_info:
        get_current_principal(_credentials("invalid"))

    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED
    assert "Could not validate credentials" in exc_info.value.detail
