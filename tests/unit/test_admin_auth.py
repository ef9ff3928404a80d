"""Unit tests for the back-office login."""

from unittest.mock import AsyncMock, MagicMock

from kissa.admin.auth import AdminAuth
from kissa.config import settings


def make_request(form: dict | None = None, session: dict | None = None) -> MagicMock:
    request = MagicMock()
    request.form = AsyncMock(return_value=form or {})
    request.session = {} if session is None else session
    return request


async def test_login_with_configured_credentials() -> None:
    auth = AdminAuth(secret_key="test-secret")
    request = make_request(
        {"username": settings.admin_username, "password": settings.admin_password}
    )

    assert await auth.login(request) is True
    assert await auth.authenticate(request) is True


async def test_login_with_wrong_password() -> None:
    auth = AdminAuth(secret_key="test-secret")
    request = make_request({"username": settings.admin_username, "password": "wrong"})

    assert await auth.login(request) is False
    assert await auth.authenticate(request) is False


async def test_logout_clears_session() -> None:
    auth = AdminAuth(secret_key="test-secret")
    request = make_request(session={"authenticated": True})

    await auth.logout(request)

    assert await auth.authenticate(request) is False
