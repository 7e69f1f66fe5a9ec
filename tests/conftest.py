import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lingualog_app import create_app, db
from lingualog_app.core.config import Config


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    SECRET_KEY = 'test-secret-key'
    # Fast hashing keeps the suite quick; production uses scrypt.
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    REQUIRE_API_TOKEN = False
    REQUIRE_RESET_TOKEN = False
    LOG_TO_FILE = False
    LOG_LEVEL = 'WARNING'


@pytest.fixture
def app():
    # No app context is held open here: each test-client request gets its own,
    # so flask-login's per-context current_user never leaks between requests.
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def signup(client, username='alice', password='secret1', question='Pet name?', answer='Rex'):
    response = client.post('/api/auth/signup', json={
        'username': username,
        'password': password,
        'forgot_question': question,
        'forgot_answer': answer,
    })
    assert response.status_code == 200, response.get_json()
    return response.get_json()['userId']


def login(client, username='alice', password='secret1'):
    response = client.post('/api/auth/login', json={'username': username, 'password': password})
    assert response.status_code == 200, response.get_json()
    return response.get_json()['token']


@pytest.fixture
def user_id(client):
    return signup(client)


@pytest.fixture
def language_id(client, user_id):
    response = client.post('/api/languages', json={
        'user_id': user_id,
        'language_code': 'es',
        'language_name': 'Spanish',
    })
    assert response.status_code == 200, response.get_json()
    return response.get_json()['id']
