"""Suggested questions curated by masters and shown to students."""

from flask import Blueprint

bp = Blueprint("suggestions", __name__, url_prefix="/api/suggestions")

from . import models  # noqa: E402  pylint: disable=wrong-import-position
from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "models", "routes"]
