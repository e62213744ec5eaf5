"""User management (master role only)."""

from flask import Blueprint

bp = Blueprint("users", __name__, url_prefix="/api/users")

from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "routes"]
