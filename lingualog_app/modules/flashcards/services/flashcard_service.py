"""
Flashcard deck and review log.

Review statistics are never stored: every listing aggregates the
``flashcard_sessions`` rows of each item (LEFT JOIN, so unreviewed items
come back with zero counts).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from flask import current_app
from sqlalchemy import case, func

from lingualog_app.core.error_handlers import ValidationError
from lingualog_app.core.extensions import db
from lingualog_app.core.signals import card_reviewed
from lingualog_app.modules.items.models import LearningItem
from lingualog_app.modules.items.services.item_service import LearningItemService
from ..models import FlashcardSession


@dataclass
class FlashcardCard:
    """A learning item together with its derived review statistics."""

    item: LearningItem
    review_count: int = 0
    correct_count: int = 0
    last_reviewed: Optional[datetime] = None

    def __getattr__(self, name):
        # Item columns (id, content, ...) read straight through.
        if name == 'item':
            raise AttributeError(name)
        return getattr(self.item, name)


class FlashcardService:

    @staticmethod
    def list_flashcards(
        user_id: int,
        language_id: Optional[int] = None,
        since: Optional[datetime] = None,
    ) -> List[FlashcardCard]:
        review_count = func.count(FlashcardSession.id)
        correct_count = func.sum(case((FlashcardSession.was_correct == True, 1), else_=0))  # noqa: E712
        last_reviewed = func.max(FlashcardSession.shown_at)

        query = (
            LearningItemService.build_query(user_id, language_id, since)
            .outerjoin(FlashcardSession, FlashcardSession.item_id == LearningItem.id)
            .with_entities(LearningItem, review_count, correct_count, last_reviewed)
            .group_by(LearningItem.id)
            .order_by(LearningItem.created_at.desc(), LearningItem.id.desc())
        )

        return [
            FlashcardCard(
                item=item,
                review_count=int(reviews or 0),
                correct_count=int(correct or 0),
                last_reviewed=last,
            )
            for item, reviews, correct, last in query.all()
        ]

    @staticmethod
    def record_session(
        user_id: int,
        item_id: int,
        was_correct: bool,
        language_id: Optional[int] = None,
    ) -> FlashcardSession:
        """Append one review event for an item the user owns."""
        item = LearningItemService.get_item(user_id, item_id)
        if language_id is None:
            language_id = item.language_id
        elif language_id != item.language_id:
            raise ValidationError('language_id does not match the item language')

        session = FlashcardSession(
            user_id=user_id,
            language_id=language_id,
            item_id=item.id,
            was_correct=bool(was_correct),
        )
        db.session.add(session)
        db.session.commit()

        card_reviewed.send(
            current_app._get_current_object(),
            user_id=user_id,
            item_id=item.id,
            language_id=language_id,
            was_correct=session.was_correct,
            session_id=session.id,
        )
        return session

    @staticmethod
    def list_sessions(
        user_id: int,
        item_id: Optional[int] = None,
        language_id: Optional[int] = None,
    ) -> List[FlashcardSession]:
        query = FlashcardSession.query.filter(FlashcardSession.user_id == user_id)
        if item_id is not None:
            query = query.filter(FlashcardSession.item_id == item_id)
        if language_id is not None:
            query = query.filter(FlashcardSession.language_id == language_id)
        return query.order_by(FlashcardSession.shown_at.desc(), FlashcardSession.id.desc()).all()
