import os
import tempfile

# Keep test runs from writing into the working directory's logs/
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-logs-'))

import pytest

from wordle_app import create_app
from wordle_app.config import TestingConfig
from wordle_app.services import WordSource, WordleGame, initialize_game_service

VOCABULARY = ["APPLE", "PAPER", "SPEED", "ERASE", "CRANE", "PLANT", "MOUSE", "HORSE", "STACK"]


class FixedChoice:
    """Stands in for random.Random so every game gets the same target."""

    def __init__(self, word):
        self.word = word

    def choice(self, seq):
        assert self.word in seq
        return self.word


@pytest.fixture
def vocabulary():
    return list(VOCABULARY)


@pytest.fixture
def make_game():
    def _make(target="APPLE", max_guesses=6):
        return WordleGame(WordSource(VOCABULARY, rng=FixedChoice(target)), max_guesses=max_guesses)
    return _make


@pytest.fixture
def client():
    initialize_game_service(word_list=VOCABULARY, rng=FixedChoice("APPLE"))
    app = create_app(TestingConfig)
    with app.test_client() as c:
        yield c
