from datetime import datetime, timezone
from lingualog_app.core.extensions import db


class Language(db.Model):
    """A language a user is studying, identified per user by its code (e.g. 'es')."""
    __tablename__ = 'languages'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    language_code = db.Column(db.String(16), nullable=False)
    language_name = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    items = db.relationship('LearningItem', backref='language', lazy=True, cascade='all, delete-orphan')

    __table_args__ = (
        db.UniqueConstraint('user_id', 'language_code', name='uq_languages_user_code'),
    )
