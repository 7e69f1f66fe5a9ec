# File: lingualog_app/core/config.py
# Core configuration, read from the environment (.env supported).

import os
from dotenv import load_dotenv

load_dotenv()

# Project root: lingualog_app/core/ -> two levels up
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

DATABASE_PATH = os.environ.get('DB_PATH') or os.path.join(BASE_DIR, "database", "language_learner.db")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """LinguaLog application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Auth tokens
    TOKEN_MAX_AGE = int(os.environ.get('TOKEN_MAX_AGE', 7 * 24 * 60 * 60))
    RESET_TOKEN_MAX_AGE = int(os.environ.get('RESET_TOKEN_MAX_AGE', 15 * 60))
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'scrypt')

    # Endpoint guards
    REQUIRE_API_TOKEN = _env_flag('REQUIRE_API_TOKEN')
    REQUIRE_RESET_TOKEN = _env_flag('REQUIRE_RESET_TOKEN')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')

    JSON_SORT_KEYS = False
