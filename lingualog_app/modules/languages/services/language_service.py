# File: lingualog_app/modules/languages/services/language_service.py
from typing import List

from flask import current_app
from sqlalchemy.exc import IntegrityError

from lingualog_app.core.error_handlers import ConflictError, NotFoundError
from lingualog_app.core.extensions import db
from lingualog_app.core.signals import language_created
from ..models import Language


class LanguageService:
    """Per-user language registry. A language code is unique per user."""

    @staticmethod
    def list_languages(user_id: int) -> List[Language]:
        return (
            Language.query
            .filter_by(user_id=user_id)
            .order_by(Language.created_at.asc(), Language.id.asc())
            .all()
        )

    @staticmethod
    def get_language(user_id: int, language_id: int) -> Language:
        language = Language.query.filter_by(id=language_id, user_id=user_id).first()
        if language is None:
            raise NotFoundError('Language not found', resource='language')
        return language

    @staticmethod
    def create_language(user_id: int, language_code: str, language_name: str) -> Language:
        """
        Register a language for a user.

        Raises:
            ConflictError if the user already has a language with this code.
        """
        duplicate_message = f'Language with code "{language_code}" already exists for this user'
        if Language.query.filter_by(user_id=user_id, language_code=language_code).first():
            raise ConflictError(duplicate_message, resource='language')

        language = Language(user_id=user_id, language_code=language_code, language_name=language_name)
        db.session.add(language)
        try:
            db.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent insert of the same code.
            db.session.rollback()
            raise ConflictError(duplicate_message, resource='language') from None

        current_app.logger.info(f"Language '{language_code}' created for user {user_id} ({language.id})")
        language_created.send(
            current_app._get_current_object(),
            user_id=user_id,
            language_id=language.id,
            language_code=language_code,
        )
        return language
