import os
import sys
import pytest

# Ensure the backend root (containing the `scoreboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreboard import create_app, db


ADMIN_PASSWORD = 'secret-pass'


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    JWT_SECRET = 'test-jwt-secret'
    JWT_ALGORITHM = 'HS256'
    TOKEN_TTL_HOURS = 24
    MIN_PASSWORD_LENGTH = 6
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Minimum bcrypt cost keeps the suite fast
    BCRYPT_LOG_ROUNDS = 4
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    CORS_ORIGINS = '*'
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import scoreboard.models  # noqa: F401
        db.create_all()
    # Requests push their own app context, so the logged-in admin cached on
    # `g` never leaks from one request into the next
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(flask_app):
    with flask_app.app_context():
        yield


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def token(client):
    """Bootstrap the admin and return the token handed back."""
    res = client.post('/api/init-password', json={'password': ADMIN_PASSWORD})
    assert res.status_code == 200
    return res.get_json()['token']


@pytest.fixture()
def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}
