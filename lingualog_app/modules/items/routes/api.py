# File: lingualog_app/modules/items/routes/api.py
from flask import current_app, jsonify, request
from flask_login import current_user

from .. import blueprint
from ..schemas import LearningItemCreateRequest, learning_item_schema, learning_items_schema
from ..services.item_service import LearningItemService
from lingualog_app.core.error_handlers import AuthenticationError
from lingualog_app.modules.shared.utils.access import require_user
from lingualog_app.modules.shared.utils.request_parsing import date_filter_arg, int_arg, json_body, parse_payload


@blueprint.route('', methods=['GET'])
def list_items():
    """API: a user's items, newest first, optionally narrowed by language and recency."""
    user = require_user(int_arg('user_id', required=True))
    items = LearningItemService.list_items(
        user.id,
        language_id=int_arg('language_id'),
        since=date_filter_arg(),
    )
    return jsonify(learning_items_schema.dump(items))


@blueprint.route('', methods=['POST'])
def create_item():
    payload = parse_payload(
        LearningItemCreateRequest,
        json_body(),
        'user_id, language_id, type and content are required',
    )
    user = require_user(payload.user_id)
    item = LearningItemService.create_item(
        user.id,
        payload.language_id,
        payload.item_type,
        payload.content,
        **payload.model_dump(include={
            'translation', 'meaning', 'pronunciation', 'audio_data', 'example_usage', 'notes',
        }),
    )
    return jsonify(learning_item_schema.dump(item))


@blueprint.route('/delete', methods=['DELETE'])
def delete_item():
    item_id = int_arg('id', required=True)

    owner_id = int_arg('user_id')
    if owner_id is not None:
        owner_id = require_user(owner_id).id
    elif current_user.is_authenticated:
        owner_id = current_user.id
    elif current_app.config.get('REQUIRE_API_TOKEN') or request.headers.get('Authorization'):
        raise AuthenticationError('Invalid or missing token')

    LearningItemService.delete_item(item_id, user_id=owner_id)
    return jsonify({'success': True})
