from lingualog_app.models import User, db
from lingualog_app.core.signals import user_registered

from conftest import login, signup


def test_signup_then_login_returns_token_for_same_user(client):
    user_id = signup(client)

    response = client.post('/api/auth/login', json={'username': 'alice', 'password': 'secret1'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['userId'] == user_id
    assert data['username'] == 'alice'

    verify = client.post('/api/auth/verify', json={'token': data['token']})
    assert verify.status_code == 200
    assert verify.get_json() == {'valid': True, 'userId': user_id, 'username': 'alice'}


def test_signup_stores_hashes_not_plaintext(app, client):
    user_id = signup(client, answer='  Rex ')
    with app.app_context():
        user = db.session.get(User, user_id)
        assert user.password_hash != 'secret1'
        assert user.forgot_answer_hash not in ('Rex', 'rex', '  Rex ')
        assert user.forgot_question == 'Pet name?'


def test_signup_requires_all_fields(client):
    response = client.post('/api/auth/signup', json={'username': 'alice', 'password': 'secret1'})
    assert response.status_code == 400
    data = response.get_json()
    assert data['error'] == 'All fields are required'
    assert 'forgot_question' in data['details']['errors']


def test_signup_rejects_blank_fields(client):
    response = client.post('/api/auth/signup', json={
        'username': '   ',
        'password': 'secret1',
        'forgot_question': 'Pet name?',
        'forgot_answer': 'Rex',
    })
    assert response.status_code == 400


def test_signup_rejects_duplicate_username(client):
    signup(client)
    response = client.post('/api/auth/signup', json={
        'username': 'alice',
        'password': 'other',
        'forgot_question': 'Q?',
        'forgot_answer': 'A',
    })
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Username already exists'


def test_signup_emits_user_registered(client):
    received = []

    def listener(sender, **kwargs):
        received.append(kwargs['user'].username)

    user_registered.connect(listener)
    try:
        signup(client, username='bob')
    finally:
        user_registered.disconnect(listener)
    assert received == ['bob']


def test_login_with_wrong_password_is_unauthorized(client):
    signup(client)
    response = client.post('/api/auth/login', json={'username': 'alice', 'password': 'nope'})
    assert response.status_code == 401
    assert response.get_json()['error'] == 'Invalid username or password'


def test_login_with_unknown_user_is_unauthorized(client):
    response = client.post('/api/auth/login', json={'username': 'ghost', 'password': 'x'})
    assert response.status_code == 401


def test_login_requires_credentials(client):
    response = client.post('/api/auth/login', json={'username': 'alice'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Username and password are required'


def test_verify_fails_closed(client):
    assert client.post('/api/auth/verify', json={}).status_code == 401
    assert client.post('/api/auth/verify', json={'token': 'junk'}).get_json() == {'valid': False}
    assert client.post('/api/auth/verify', json={'token': 12345}).status_code == 401
    assert client.post('/api/auth/verify', data='not json', content_type='text/plain').status_code == 401


def test_forgot_password_returns_question_then_checks_answer(client):
    user_id = signup(client)

    first = client.post('/api/auth/forgot-password', json={'username': 'alice'})
    assert first.status_code == 200
    assert first.get_json() == {'success': True, 'userId': user_id, 'question': 'Pet name?'}

    second = client.post('/api/auth/forgot-password', json={'username': 'alice', 'forgot_answer': ' rex '})
    assert second.status_code == 200
    data = second.get_json()
    assert data['success'] is True
    assert data['userId'] == user_id
    assert data['resetToken']


def test_forgot_password_wrong_answer(client):
    signup(client)
    response = client.post('/api/auth/forgot-password', json={'username': 'alice', 'forgot_answer': 'Max'})
    assert response.status_code == 401
    assert response.get_json()['error'] == 'Incorrect answer'


def test_forgot_password_unknown_user(client):
    response = client.post('/api/auth/forgot-password', json={'username': 'ghost'})
    assert response.status_code == 404
    assert response.get_json()['error'] == 'User not found'


def test_forgot_password_requires_username(client):
    response = client.post('/api/auth/forgot-password', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Username is required'


def test_reset_password_changes_login(client):
    user_id = signup(client)
    response = client.post('/api/auth/reset-password', json={'userId': user_id, 'newPassword': 'fresh-pass'})
    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'message': 'Password reset successfully'}

    assert client.post('/api/auth/login', json={'username': 'alice', 'password': 'secret1'}).status_code == 401
    assert login(client, password='fresh-pass')


def test_reset_password_with_reset_token(client):
    user_id = signup(client)
    answer = client.post('/api/auth/forgot-password', json={'username': 'alice', 'forgot_answer': 'Rex'})
    reset_token = answer.get_json()['resetToken']

    response = client.post('/api/auth/reset-password', json={
        'userId': user_id,
        'newPassword': 'fresh-pass',
        'resetToken': reset_token,
    })
    assert response.status_code == 200
    assert login(client, password='fresh-pass')


def test_reset_password_rejects_foreign_reset_token(client):
    alice = signup(client)
    bob = signup(client, username='bob', answer='Fido')
    bob_token = client.post(
        '/api/auth/forgot-password', json={'username': 'bob', 'forgot_answer': 'fido'}
    ).get_json()['resetToken']

    response = client.post('/api/auth/reset-password', json={
        'userId': alice,
        'newPassword': 'hijacked',
        'resetToken': bob_token,
    })
    assert response.status_code == 401
    assert bob != alice


def test_reset_password_can_require_token(app, client):
    user_id = signup(client)
    app.config['REQUIRE_RESET_TOKEN'] = True
    response = client.post('/api/auth/reset-password', json={'userId': user_id, 'newPassword': 'fresh-pass'})
    assert response.status_code == 401


def test_reset_password_unknown_user(client):
    response = client.post('/api/auth/reset-password', json={'userId': 999, 'newPassword': 'x'})
    assert response.status_code == 404


def test_reset_password_requires_fields(client):
    response = client.post('/api/auth/reset-password', json={'userId': 1})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'User ID and new password are required'


def test_unknown_api_path_and_wrong_method_are_json(client):
    missing = client.get('/api/nothing-here')
    assert missing.status_code == 404
    assert missing.get_json()['error'] == 'Endpoint not found'

    wrong_method = client.get('/api/auth/login')
    assert wrong_method.status_code == 405
    assert wrong_method.get_json()['code'] == 'METHOD_NOT_ALLOWED'


def test_padded_username_logs_in_as_signed_up(client):
    user_id = signup(client, username=' alice ')

    response = client.post('/api/auth/login', json={'username': ' alice ', 'password': 'secret1'})
    assert response.status_code == 200
    assert response.get_json()['userId'] == user_id
    assert response.get_json()['username'] == 'alice'
    assert login(client, username='alice')


def test_reset_password_treats_empty_reset_token_as_absent(client):
    user_id = signup(client)
    response = client.post('/api/auth/reset-password', json={
        'userId': user_id,
        'newPassword': 'fresh-pass',
        'resetToken': '',
    })
    assert response.status_code == 200
    assert login(client, password='fresh-pass')
