"""
Shared fixtures: a small in-memory dictionary and a seeded random source.
"""

import os
import random
import tempfile

# Keep test logs out of the working tree; must be set before the package is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle_like_logs_"))

import pytest

from wordle_like import create_app
from wordle_like.config import TestingConfig
from wordle_like.models.game import Settings
from wordle_like.services.dictionary import WordDictionary
from wordle_like.services.game_service import GameService, initialize_game_service
from wordle_like.services.game_session import GameSession

WORDS = [
    "ant", "cat", "dog",
    "crab", "frog", "from", "gulf",
    "abide", "allee", "broom", "crane", "eagle", "react", "speed", "trace", "train",
    "planet", "string",
    "example",
    "absolute",
    "adventure",
    "basketball",
]


@pytest.fixture
def dictionary():
    return WordDictionary({word: 1 for word in WORDS})


@pytest.fixture
def rng():
    return random.Random(0)


@pytest.fixture
def make_session(dictionary):
    def _make(target, max_attempts=6, infinite_mode=False, is_shared=False):
        settings = Settings(word_length=len(target), max_attempts=max_attempts,
                            infinite_mode=infinite_mode)
        return GameSession.new(target, settings, dictionary, is_shared=is_shared)
    return _make


@pytest.fixture
def service(dictionary, rng):
    return GameService(dictionary, rng=rng, default_settings=Settings(word_length=5, max_attempts=6))


@pytest.fixture
def app(dictionary):
    initialize_game_service(TestingConfig, dictionary=dictionary, rng=random.Random(0))
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def type_word():
    """Enter a word letter by letter starting at the first cell."""
    def _type(session, word):
        session.select_cell(0)
        for letter in word:
            session.set_cell(session.cursor, letter)
    return _type
