"""In-place additive schema migration.

``db.create_all()`` never touches tables that already exist, so databases
created by older releases may be missing columns. Each missing column listed
in ``ADDITIVE_COLUMNS`` is added with ``ALTER TABLE ... ADD COLUMN``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

ADDITIVE_COLUMNS: Dict[str, Sequence[Tuple[str, str]]] = {
    'users': (
        ('password_hash', 'TEXT'),
        ('forgot_question', 'TEXT'),
        ('forgot_answer_hash', 'TEXT'),
    ),
    'learning_items': (
        ('audio_data', 'TEXT'),
    ),
}

AUTH_COLUMNS = frozenset({'password_hash', 'forgot_question', 'forgot_answer_hash'})

# Child tables first so foreign keys never dangle mid-purge.
_PURGE_ORDER = ('flashcard_sessions', 'learning_items', 'languages')


def missing_columns(engine: Engine) -> Dict[str, List[Tuple[str, str]]]:
    """Return ``{table: [(column, ddl_type), ...]}`` for columns absent from existing tables."""

    inspector = inspect(engine)
    tables = set(inspector.get_table_names())
    result: Dict[str, List[Tuple[str, str]]] = {}
    for table, columns in ADDITIVE_COLUMNS.items():
        if table not in tables:
            continue
        existing = {column['name'] for column in inspector.get_columns(table)}
        absent = [(name, ddl) for name, ddl in columns if name not in existing]
        if absent:
            result[table] = absent
    return result


def purge_passwordless_users(engine: Engine, log: Optional[logging.Logger] = None) -> int:
    """Delete users that cannot authenticate, together with everything they own."""

    log = log or logger
    with engine.begin() as connection:
        user_ids = [
            row[0]
            for row in connection.execute(
                text("SELECT id FROM users WHERE password_hash IS NULL OR password_hash = ''")
            )
        ]
        if not user_ids:
            return 0

        log.info("Removing %d legacy user(s) without passwords...", len(user_ids))
        for user_id in user_ids:
            for table in _PURGE_ORDER:
                connection.execute(text(f"DELETE FROM {table} WHERE user_id = :user_id"), {'user_id': user_id})
            connection.execute(text("DELETE FROM users WHERE id = :user_id"), {'user_id': user_id})
    return len(user_ids)


def migrate_schema(engine: Engine, log: Optional[logging.Logger] = None) -> Dict[str, List[str]]:
    """Add missing columns and clean up legacy rows.

    Returns the columns that were added, keyed by table.
    """

    log = log or logger
    added: Dict[str, List[str]] = {}

    for table, columns in missing_columns(engine).items():
        with engine.begin() as connection:
            for name, ddl in columns:
                connection.execute(text(f"ALTER TABLE {table} ADD COLUMN {name} {ddl}"))
                added.setdefault(table, []).append(name)
                log.info("Added column %s to %s (migrate in place).", name, table)

    if AUTH_COLUMNS.intersection(added.get('users', ())):
        removed = purge_passwordless_users(engine, log)
        if removed:
            log.warning("Legacy users without passwords were removed; they need to sign up again.")

    return added
