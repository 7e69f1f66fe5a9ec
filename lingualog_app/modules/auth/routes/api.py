# File: lingualog_app/modules/auth/routes/api.py
from flask import jsonify
from pydantic import ValidationError as PydanticValidationError

from .. import blueprint
from ..schemas import ForgotPasswordRequest, LoginRequest, ResetPasswordRequest, SignupRequest, VerifyRequest
from ..services.auth_service import AuthService
from lingualog_app.core.error_handlers import ValidationError
from lingualog_app.modules.shared.utils.request_parsing import json_body, parse_payload


@blueprint.route('/signup', methods=['POST'])
def signup():
    """Create an account protected by a password and a security question."""
    payload = parse_payload(SignupRequest, json_body(), 'All fields are required')
    user = AuthService.register_user(
        payload.username,
        payload.password,
        payload.forgot_question,
        payload.forgot_answer,
    )
    return jsonify({
        'success': True,
        'userId': user.id,
        'message': 'User created successfully',
    })


@blueprint.route('/login', methods=['POST'])
def login():
    payload = parse_payload(LoginRequest, json_body(), 'Username and password are required')
    return jsonify(AuthService.login(payload.username, payload.password))


@blueprint.route('/verify', methods=['POST'])
def verify():
    """Check a session token. Never errors: an unusable token is just ``valid: false``."""
    try:
        payload = VerifyRequest.model_validate(json_body())
    except (ValidationError, PydanticValidationError):
        return jsonify({'valid': False}), 401

    decoded = AuthService.verify(payload.token)
    if decoded is None:
        return jsonify({'valid': False}), 401
    return jsonify({'valid': True, **decoded})


@blueprint.route('/forgot-password', methods=['POST'])
def forgot_password():
    """Two-phase recovery: username only returns the question, username + answer checks it."""
    payload = parse_payload(ForgotPasswordRequest, json_body(), 'Username is required')
    if not payload.forgot_answer:
        return jsonify(AuthService.get_security_question(payload.username))
    return jsonify(AuthService.check_security_answer(payload.username, payload.forgot_answer))


@blueprint.route('/reset-password', methods=['POST'])
def reset_password():
    payload = parse_payload(ResetPasswordRequest, json_body(), 'User ID and new password are required')
    AuthService.reset_password(payload.user_id, payload.new_password, payload.reset_token)
    return jsonify({
        'success': True,
        'message': 'Password reset successfully',
    })
