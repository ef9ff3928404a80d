"""SQLAdmin authentication backend."""

import secrets

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from kissa.config import settings


class AdminAuth(AuthenticationBackend):
    """Single shared back-office account configured through settings."""

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username") or "")
        password = str(form.get("password") or "")
        ok = secrets.compare_digest(username, settings.admin_username) and secrets.compare_digest(
            password, settings.admin_password
        )
        if ok:
            request.session.update({"authenticated": True})
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("authenticated", False))
