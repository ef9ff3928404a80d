"""Admin back office setup."""

from fastapi import FastAPI
from sqladmin import Admin

from kissa.admin.auth import AdminAuth
from kissa.admin.views import ADMIN_VIEWS
from kissa.config import settings
from kissa.database import engine


def setup_admin(app: FastAPI) -> Admin:
    """Attach the SQLAdmin back office to app under /admin."""
    auth = AdminAuth(secret_key=settings.admin_secret_key)
    admin = Admin(app, engine, authentication_backend=auth, title="Kissa Admin")
    for view in ADMIN_VIEWS:
        admin.add_view(view)
    return admin
