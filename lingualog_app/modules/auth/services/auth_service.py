"""
Auth Service - Core authentication logic.

Handles signup, login, token verification and the security-question
password recovery flow. Decouples DB logic from Routes.
"""
from typing import Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from lingualog_app.core.error_handlers import AuthenticationError, NotFoundError, ValidationError
from lingualog_app.core.extensions import db
from lingualog_app.core.signals import user_registered
from ..models import User
from .credential_service import (
    hash_secret,
    issue_reset_token,
    issue_token,
    normalize_answer,
    verify_reset_token,
    verify_secret,
    verify_token,
)


class AuthService:
    """Service for Authentication related operations."""

    @staticmethod
    def register_user(username: str, password: str, forgot_question: str, forgot_answer: str) -> User:
        """
        Create a user with hashed password and security answer.

        Raises:
            ValidationError if the username is taken.
        """
        if User.query.filter_by(username=username).first():
            raise ValidationError('Username already exists')

        user = User(
            username=username,
            password_hash=hash_secret(password),
            forgot_question=forgot_question,
            forgot_answer_hash=hash_secret(normalize_answer(forgot_answer)),
        )
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ValidationError('Username already exists') from None

        current_app.logger.info(f"User registered: {username} ({user.id})")

        try:
            user_registered.send(current_app._get_current_object(), user=user)
        except Exception as e:
            current_app.logger.error(f"Error emitting user_registered signal: {e}")

        return user

    @staticmethod
    def authenticate_user(username: str, password: str) -> Optional[User]:
        """
        Verify credentials.

        Returns:
            User object if valid, None otherwise.
        """
        user = User.query.filter_by(username=username).first()
        if user and verify_secret(password, user.password_hash):
            return user
        return None

    @staticmethod
    def login(username: str, password: str) -> dict:
        user = AuthService.authenticate_user(username, password)
        if user is None:
            current_app.logger.info(f"Failed login for '{username}'")
            raise AuthenticationError('Invalid username or password')

        return {
            'success': True,
            'token': issue_token(user.id, user.username),
            'userId': user.id,
            'username': user.username,
        }

    @staticmethod
    def verify(token: Optional[str]) -> Optional[dict]:
        """Decode a session token, confirming the user still exists."""
        payload = verify_token(token)
        if payload is None:
            return None
        user = db.session.get(User, payload['userId'])
        if user is None or user.username != payload['username']:
            return None
        return payload

    @staticmethod
    def get_security_question(username: str) -> dict:
        user = User.query.filter_by(username=username).first()
        if user is None:
            raise NotFoundError('User not found', resource='user')
        return {
            'success': True,
            'userId': user.id,
            'question': user.forgot_question,
        }

    @staticmethod
    def check_security_answer(username: str, answer: str) -> dict:
        user = User.query.filter_by(username=username).first()
        if user is None:
            raise NotFoundError('User not found', resource='user')

        if not verify_secret(normalize_answer(answer), user.forgot_answer_hash):
            current_app.logger.info(f"Incorrect security answer for '{username}'")
            raise AuthenticationError('Incorrect answer')

        return {
            'success': True,
            'userId': user.id,
            'resetToken': issue_reset_token(user.id),
        }

    @staticmethod
    def reset_password(user_id: int, new_password: str, reset_token: Optional[str] = None) -> None:
        user = db.session.get(User, user_id)
        if user is None:
            raise NotFoundError('User not found', resource='user')

        if reset_token or current_app.config.get('REQUIRE_RESET_TOKEN'):
            if not verify_reset_token(reset_token, user_id):
                raise AuthenticationError('Invalid or expired reset token')

        user.password_hash = hash_secret(new_password)
        db.session.commit()
        current_app.logger.info(f"Password reset for user {user_id}")
