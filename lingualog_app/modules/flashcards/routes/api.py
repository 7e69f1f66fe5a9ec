# File: lingualog_app/modules/flashcards/routes/api.py
from flask import jsonify

from .. import blueprint
from ..schemas import (
    FlashcardSessionCreateRequest,
    flashcard_items_schema,
    flashcard_session_schema,
    flashcard_sessions_schema,
)
from ..services.flashcard_service import FlashcardService
from lingualog_app.modules.shared.utils.access import require_user
from lingualog_app.modules.shared.utils.request_parsing import date_filter_arg, int_arg, json_body, parse_payload


@blueprint.route('', methods=['GET'])
def list_flashcards():
    """API: the review deck, each item with review_count, correct_count and last_reviewed."""
    user = require_user(int_arg('user_id', required=True))
    cards = FlashcardService.list_flashcards(
        user.id,
        language_id=int_arg('language_id'),
        since=date_filter_arg(),
    )
    return jsonify(flashcard_items_schema.dump(cards))


@blueprint.route('', methods=['POST'])
def record_session():
    """API: record one answer to a flashcard."""
    payload = parse_payload(
        FlashcardSessionCreateRequest,
        json_body(),
        'user_id, item_id and was_correct are required',
    )
    user = require_user(payload.user_id)
    session = FlashcardService.record_session(
        user.id,
        payload.item_id,
        payload.was_correct,
        language_id=payload.language_id,
    )
    return jsonify(flashcard_session_schema.dump(session))


@blueprint.route('/sessions', methods=['GET'])
def list_sessions():
    user = require_user(int_arg('user_id', required=True))
    sessions = FlashcardService.list_sessions(
        user.id,
        item_id=int_arg('item_id'),
        language_id=int_arg('language_id'),
    )
    return jsonify(flashcard_sessions_schema.dump(sessions))
