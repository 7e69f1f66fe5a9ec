# File: lingualog_app/modules/items/__init__.py
from flask import Blueprint

blueprint = Blueprint('items', __name__)


def setup_module(app):
    from . import models  # noqa: F401
    from .routes import api  # noqa: F401
