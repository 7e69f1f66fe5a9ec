# File: lingualog_app/modules/items/services/item_service.py
from datetime import datetime
from typing import List, Optional

from flask import current_app

from lingualog_app.core.error_handlers import NotFoundError
from lingualog_app.core.extensions import db
from lingualog_app.core.signals import item_created, item_deleted
from lingualog_app.modules.languages.services.language_service import LanguageService
from ..models import LearningItem


class LearningItemService:
    """Create, list and delete the items a user logs for their languages."""

    @staticmethod
    def build_query(user_id: int, language_id: Optional[int] = None, since: Optional[datetime] = None):
        """Base query shared by the item list and the flashcard deck."""
        query = LearningItem.query.filter(LearningItem.user_id == user_id)
        if language_id is not None:
            query = query.filter(LearningItem.language_id == language_id)
        if since is not None:
            query = query.filter(LearningItem.created_at >= since)
        return query

    @staticmethod
    def list_items(user_id: int, language_id: Optional[int] = None, since: Optional[datetime] = None) -> List[LearningItem]:
        return (
            LearningItemService.build_query(user_id, language_id, since)
            .order_by(LearningItem.created_at.desc(), LearningItem.id.desc())
            .all()
        )

    @staticmethod
    def get_item(user_id: int, item_id: int) -> LearningItem:
        item = LearningItem.query.filter_by(id=item_id, user_id=user_id).first()
        if item is None:
            raise NotFoundError('Item not found', resource='learning_item')
        return item

    @staticmethod
    def create_item(user_id: int, language_id: int, item_type: str, content: str, **details) -> LearningItem:
        """
        Log a new item. ``details`` carries the optional text fields
        (translation, meaning, pronunciation, audio_data, example_usage, notes).
        """
        LanguageService.get_language(user_id, language_id)

        item = LearningItem(
            user_id=user_id,
            language_id=language_id,
            item_type=item_type,
            content=content,
            **details,
        )
        db.session.add(item)
        db.session.commit()

        current_app.logger.info(f"Item {item.id} ({item_type}) created for user {user_id}, language {language_id}")
        item_created.send(
            current_app._get_current_object(),
            user_id=user_id,
            item_id=item.id,
            language_id=language_id,
            item_type=item_type,
        )
        return item

    @staticmethod
    def delete_item(item_id: int, user_id: Optional[int] = None) -> None:
        """Delete an item and its review history. ``user_id`` restricts the delete to that owner."""
        query = LearningItem.query.filter_by(id=item_id)
        if user_id is not None:
            query = query.filter_by(user_id=user_id)
        item = query.first()
        if item is None:
            raise NotFoundError('Item not found', resource='learning_item')

        owner_id = item.user_id
        db.session.delete(item)
        db.session.commit()

        current_app.logger.info(f"Item {item_id} deleted for user {owner_id}")
        item_deleted.send(current_app._get_current_object(), user_id=owner_id, item_id=item_id)
