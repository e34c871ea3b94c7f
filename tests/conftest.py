import os
import tempfile

# Keep test runs from writing logs into the working directory
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='worsd-logs-'))

import pytest

from worsd import create_app
from worsd.config import TestingConfig
from worsd.services.game_service import initialize_game_service
from worsd.services.vocabulary import Vocabulary

WORDS = ["crane", "slate", "crate", "trace", "eerie", "speed", "abide", "steer", "worsd"]


@pytest.fixture
def vocabulary():
    return Vocabulary(WORDS)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def game_service(words_file):
    class WordsConfig(TestingConfig):
        WORDS_FILE = str(words_file)

    return initialize_game_service(WordsConfig)


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
