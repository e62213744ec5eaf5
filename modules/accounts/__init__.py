"""Accounts module package: registration, login, logout and the current user."""

from flask import Blueprint

bp = Blueprint("accounts", __name__, url_prefix="/api")

from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "routes"]
