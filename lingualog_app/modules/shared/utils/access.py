"""Ownership checks for endpoints keyed by ``user_id``."""

from flask import current_app, request
from flask_login import current_user

from lingualog_app.core.error_handlers import AuthenticationError, AuthorizationError, NotFoundError
from lingualog_app.core.extensions import db
from lingualog_app.modules.auth.models import User


def require_user(user_id: int) -> User:
    """
    Return the user behind ``user_id`` if the caller may act for them.

    A bearer token is optional unless ``REQUIRE_API_TOKEN`` is set; when one
    is sent it must be valid and belong to ``user_id``.
    """
    if current_user.is_authenticated:
        if current_user.id != user_id:
            raise AuthorizationError('Token does not belong to this user')
    elif current_app.config.get('REQUIRE_API_TOKEN') or request.headers.get('Authorization'):
        raise AuthenticationError('Invalid or missing token')

    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError('User not found', resource='user')
    return user
