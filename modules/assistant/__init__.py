"""Course assistant: ask a question, question history, feedback on answers."""

from flask import Blueprint

bp = Blueprint("assistant", __name__, url_prefix="/api")

from . import models  # noqa: E402  pylint: disable=wrong-import-position
from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "models", "routes"]
