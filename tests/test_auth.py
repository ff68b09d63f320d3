"""Tests for bearer-token authentication."""

import httpx
import pytest

from doapi.auth import BearerTokenAuth


@pytest.mark.asyncio
async def test_bearer_token_auth_authenticate():
    """BearerTokenAuth adds the Authorization header."""
    auth = BearerTokenAuth(token="test_token")
    request = httpx.Request("GET", "https://api.digitalocean.com/v2/account")
    await auth.async_authenticate(request)
    assert request.headers["Authorization"] == "Bearer test_token"


@pytest.mark.asyncio
async def test_bearer_token_auth_overwrites_existing_header():
    auth = BearerTokenAuth(token="fresh")
    request = httpx.Request(
        "GET", "https://api.digitalocean.com/v2/account", headers={"Authorization": "Bearer stale"}
    )
    await auth.async_authenticate(request)
    assert request.headers.get_list("Authorization") == ["Bearer fresh"]


@pytest.mark.parametrize(("token", "expected"), [("abc", True), ("", False), (None, False)])
def test_bearer_token_auth_has_token(token, expected):
    assert BearerTokenAuth(token).has_token is expected


def test_bearer_token_auth_repr_hides_token():
    assert "secret" not in repr(BearerTokenAuth("secret"))
