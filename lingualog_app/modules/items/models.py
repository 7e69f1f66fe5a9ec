from datetime import datetime, timezone
from typing import Literal, get_args

from lingualog_app.core.extensions import db

ItemType = Literal['word', 'sentence', 'grammar', 'letter']
ITEM_TYPES = get_args(ItemType)


class LearningItem(db.Model):
    """
    A single entry logged by a user for one of their languages:
    a word, a sentence, a grammar point or a letter.
    """
    __tablename__ = 'learning_items'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    language_id = db.Column(db.Integer, db.ForeignKey('languages.id', ondelete='CASCADE'), nullable=False, index=True)
    item_type = db.Column('type', db.String(20), nullable=False)
    content = db.Column(db.Text, nullable=False)
    translation = db.Column(db.Text)
    meaning = db.Column(db.Text)
    pronunciation = db.Column(db.Text)
    audio_data = db.Column(db.Text)  # data URL from the browser recorder
    example_usage = db.Column(db.Text)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False, index=True)

    sessions = db.relationship('FlashcardSession', backref='item', lazy=True, cascade='all, delete-orphan')

    __table_args__ = (
        db.CheckConstraint(
            "type IN (%s)" % ", ".join(f"'{name}'" for name in ITEM_TYPES),
            name='ck_learning_items_type',
        ),
    )
