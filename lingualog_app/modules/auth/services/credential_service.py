"""
Credential store.

Password and security-answer hashing (werkzeug) and signed, expiring
session tokens (itsdangerous). Every verify function fails closed.
"""
from typing import Optional, TypedDict

from flask import current_app
from itsdangerous import BadData, URLSafeTimedSerializer
from werkzeug.security import check_password_hash, generate_password_hash

TOKEN_SALT = 'lingualog-auth-token'
RESET_TOKEN_SALT = 'lingualog-password-reset'


class TokenPayload(TypedDict):
    userId: int
    username: str


def normalize_answer(answer: str) -> str:
    """Security answers are matched case-insensitively, ignoring surrounding whitespace."""
    return (answer or '').strip().lower()


def hash_secret(secret: str) -> str:
    method = current_app.config.get('PASSWORD_HASH_METHOD', 'scrypt')
    return generate_password_hash(secret, method=method)


def verify_secret(secret: str, digest: Optional[str]) -> bool:
    if not digest or secret is None:
        return False
    try:
        return check_password_hash(digest, secret)
    except ValueError:
        # Digest in an unknown format.
        return False


def get_serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'])


def issue_token(user_id: int, username: str) -> str:
    return get_serializer().dumps({'userId': user_id, 'username': username}, salt=TOKEN_SALT)


def verify_token(token: Optional[str]) -> Optional[TokenPayload]:
    """Decode a session token; ``None`` for anything malformed, expired or tampered."""
    if not token or not isinstance(token, str):
        return None
    try:
        payload = get_serializer().loads(
            token,
            salt=TOKEN_SALT,
            max_age=current_app.config.get('TOKEN_MAX_AGE', 7 * 24 * 60 * 60),
        )
    except BadData:
        return None

    if not isinstance(payload, dict):
        return None
    user_id, username = payload.get('userId'), payload.get('username')
    if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(username, str):
        return None
    return {'userId': user_id, 'username': username}


def issue_reset_token(user_id: int) -> str:
    return get_serializer().dumps(user_id, salt=RESET_TOKEN_SALT)


def verify_reset_token(token: Optional[str], user_id: int) -> bool:
    if not token or not isinstance(token, str):
        return False
    try:
        token_user_id = get_serializer().loads(
            token,
            salt=RESET_TOKEN_SALT,
            max_age=current_app.config.get('RESET_TOKEN_MAX_AGE', 15 * 60),
        )
    except BadData:
        return False
    return token_user_id == user_id
