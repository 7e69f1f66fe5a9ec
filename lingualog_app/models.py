# File: lingualog_app/models.py
# Single import point for every model; importing this module registers all tables.

from .core.extensions import db
from .modules.auth.models import User
from .modules.languages.models import Language
from .modules.items.models import ITEM_TYPES, LearningItem
from .modules.flashcards.models import FlashcardSession

__all__ = [
    'db',
    'User',
    'Language',
    'LearningItem',
    'ITEM_TYPES',
    'FlashcardSession',
]
