# File: lingualog_app/modules/flashcards/__init__.py
from flask import Blueprint

blueprint = Blueprint('flashcards', __name__)


def setup_module(app):
    from . import models  # noqa: F401
    from . import events  # noqa: F401
    from .routes import api  # noqa: F401
