from conftest import login, signup


def create_language(client, user_id, code='es', name='Spanish', **kwargs):
    return client.post('/api/languages', json={
        'user_id': user_id,
        'language_code': code,
        'language_name': name,
    }, **kwargs)


def test_create_and_list_languages(client, user_id):
    response = create_language(client, user_id)
    assert response.status_code == 200
    created = response.get_json()
    assert created['user_id'] == user_id
    assert created['language_code'] == 'es'
    assert created['language_name'] == 'Spanish'
    assert created['id'] > 0
    assert created['created_at']

    listing = client.get(f'/api/languages?user_id={user_id}')
    assert listing.status_code == 200
    assert [(lang['language_code'], lang['language_name']) for lang in listing.get_json()] == [('es', 'Spanish')]


def test_duplicate_language_code_is_a_conflict(client, user_id):
    assert create_language(client, user_id).status_code == 200
    duplicate = create_language(client, user_id, name='Español')
    assert duplicate.status_code == 409
    assert duplicate.get_json()['error'] == 'Language with code "es" already exists for this user'
    assert len(client.get(f'/api/languages?user_id={user_id}').get_json()) == 1


def test_same_code_for_different_users_is_allowed(client, user_id):
    other = signup(client, username='bob')
    assert create_language(client, user_id).status_code == 200
    assert create_language(client, other).status_code == 200
    assert len(client.get(f'/api/languages?user_id={other}').get_json()) == 1


def test_languages_are_listed_in_creation_order(client, user_id):
    for code, name in [('es', 'Spanish'), ('fr', 'French'), ('ja', 'Japanese')]:
        create_language(client, user_id, code, name)
    codes = [lang['language_code'] for lang in client.get(f'/api/languages?user_id={user_id}').get_json()]
    assert codes == ['es', 'fr', 'ja']


def test_create_language_requires_fields(client, user_id):
    response = client.post('/api/languages', json={'user_id': user_id, 'language_code': 'es'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'user_id, language_code, and language_name are required'

    blank = create_language(client, user_id, code='  ')
    assert blank.status_code == 400


def test_list_languages_requires_user_id(client):
    response = client.get('/api/languages')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'user_id parameter required'

    malformed = client.get('/api/languages?user_id=abc')
    assert malformed.status_code == 400
    assert malformed.get_json()['error'] == 'user_id must be an integer'


def test_unknown_user_is_not_created_lazily(client):
    response = create_language(client, 4242)
    assert response.status_code == 404
    assert response.get_json()['error'] == 'User not found'
    assert client.get('/api/languages?user_id=4242').status_code == 404


def test_bearer_token_must_match_user(client, user_id):
    token = login(client)
    other = signup(client, username='bob')

    own = create_language(client, user_id, headers={'Authorization': f'Bearer {token}'})
    assert own.status_code == 200

    foreign = create_language(client, other, headers={'Authorization': f'Bearer {token}'})
    assert foreign.status_code == 403


def test_invalid_bearer_token_is_rejected(client, user_id):
    response = client.get(
        f'/api/languages?user_id={user_id}',
        headers={'Authorization': 'Bearer not-a-token'},
    )
    assert response.status_code == 401


def test_token_can_be_required(app, client, user_id):
    app.config['REQUIRE_API_TOKEN'] = True
    assert client.get(f'/api/languages?user_id={user_id}').status_code == 401

    token = login(client)
    response = client.get(f'/api/languages?user_id={user_id}', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 200
