import os
import sys
import pytest

# Ensure the backend root (containing the `hangman` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from hangman import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import hangman.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def service(flask_app):
    from hangman.services.games import GameService, SqlGameStores
    return GameService(SqlGameStores(db.session))


@pytest.fixture()
def player(flask_app):
    from hangman.models import Player
    p = Player(name='Alice')
    db.session.add(p)
    db.session.commit()
    return p


@pytest.fixture()
def add_words(flask_app):
    """Insert unused words and return them; tests use one word to pin the target."""
    from hangman.models import Word

    def _add(*texts):
        words = [Word(text=t) for t in texts]
        db.session.add_all(words)
        db.session.commit()
        return words

    return _add
