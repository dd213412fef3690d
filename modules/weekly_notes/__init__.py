"""Weekly planner module package."""

from flask import Blueprint

bp = Blueprint("weekly_notes", __name__, url_prefix="/weekly-notes")

from . import models  # noqa: E402  pylint: disable=wrong-import-position
from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "models", "routes"]
