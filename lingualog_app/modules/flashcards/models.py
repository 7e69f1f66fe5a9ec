from datetime import datetime, timezone
from lingualog_app.core.extensions import db


class FlashcardSession(db.Model):
    """
    One review event: an item was shown and the user answered it right or wrong.
    Append-only; review statistics are aggregated from these rows.
    """
    __tablename__ = 'flashcard_sessions'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    language_id = db.Column(db.Integer, db.ForeignKey('languages.id', ondelete='CASCADE'), nullable=False)
    item_id = db.Column(db.Integer, db.ForeignKey('learning_items.id', ondelete='CASCADE'), nullable=False, index=True)
    was_correct = db.Column(db.Boolean, nullable=False, default=False)
    shown_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
