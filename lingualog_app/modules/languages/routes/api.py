# File: lingualog_app/modules/languages/routes/api.py
from flask import jsonify

from .. import blueprint
from ..schemas import LanguageCreateRequest, language_schema, languages_schema
from ..services.language_service import LanguageService
from lingualog_app.modules.shared.utils.access import require_user
from lingualog_app.modules.shared.utils.request_parsing import int_arg, json_body, parse_payload


@blueprint.route('', methods=['GET'])
def list_languages():
    """API: languages registered by a user."""
    user = require_user(int_arg('user_id', required=True))
    return jsonify(languages_schema.dump(LanguageService.list_languages(user.id)))


@blueprint.route('', methods=['POST'])
def create_language():
    payload = parse_payload(
        LanguageCreateRequest,
        json_body(),
        'user_id, language_code, and language_name are required',
    )
    user = require_user(payload.user_id)
    language = LanguageService.create_language(user.id, payload.language_code, payload.language_name)
    return jsonify(language_schema.dump(language))
