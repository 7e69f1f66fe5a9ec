from __future__ import annotations
from datetime import datetime, timezone
from flask_login import UserMixin
from lingualog_app.core.extensions import db


class User(UserMixin, db.Model):
    """Application user model."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    forgot_question = db.Column(db.String(255), nullable=False)
    forgot_answer_hash = db.Column(db.String(256), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    # --- Relationships (String Reference) ---
    languages = db.relationship('Language', backref='user', lazy=True, cascade='all, delete-orphan')
    learning_items = db.relationship('LearningItem', backref='user', lazy=True, cascade='all, delete-orphan')
    flashcard_sessions = db.relationship('FlashcardSession', backref='user', lazy=True, cascade='all, delete-orphan')

    def __repr__(self):
        return f'<User {self.id} {self.username}>'
