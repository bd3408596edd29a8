import os
import sys
import pytest

# Ensure the backend root (containing the `trivia` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from trivia import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_LOG_ROUNDS = 4
    ALLOW_REPLAY = False
    LEADERBOARD_LIMIT = 1000
    RESULT_READ_MAX_ATTEMPTS = 3
    RESULT_READ_BACKOFF_SEC = '0'


FIVE_CLUE_BOARD = [
    {
        'category': 'Hometowns',
        'clues': [
            {'clue': 'Blue Ridge city on the James River', 'answer': 'What is Lynchburg?', 'value': 200},
            {'clue': 'Davenport belongs to these', 'answer': 'What are the Quad Cities?', 'value': 400},
            {'clue': 'Canals built for beer', 'answer': 'What is Dublin?', 'value': 600},
            {'clue': 'Go Blue', 'answer': 'What is Ann Arbor?', 'value': 800},
            {'clue': 'Home of the Panthers', 'answer': 'What is Charlotte?', 'value': 1000},
        ],
    },
]

IBM_FINAL = {
    'category': 'Computers',
    'clue': 'Armonk, NY mainframe maker',
    'answer': 'What is IBM?',
}


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import trivia.models  # noqa: F401
        db.create_all()
        yield application
        from trivia.services import play
        play._active_sessions.clear()
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def five_clue_board(flask_app):
    from trivia.gamedata import seed_questions
    return seed_questions(board=FIVE_CLUE_BOARD, final=IBM_FINAL)


@pytest.fixture()
def default_board(flask_app):
    from trivia.gamedata import seed_questions
    return seed_questions()


def register(client, username, display_name=None, password='password'):
    res = client.post('/register', json={
        'username': username,
        'password': password,
        'display_name': display_name,
    })
    assert res.status_code == 201
    return res.get_json()['user']


@pytest.fixture()
def player(client):
    return register(client, 'hunter', 'Hunter')


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
