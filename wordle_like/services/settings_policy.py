"""
Settings Policy

Validates raw settings input and decides when a settings change restarts
the session.
"""

import random
from typing import Any, Mapping, Optional

from ..config.game_settings import (
    DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_LENGTH, INFINITE,
    MAX_ATTEMPTS, MAX_WORD_LENGTH, MIN_ATTEMPTS, MIN_WORD_LENGTH,
)
from ..models.game import Settings
from .dictionary import WordDictionary, pick_target
from .game_session import GameSession

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _clamp(value: Any, minimum: int, maximum: int) -> int:
    """Coerces to int within [minimum, maximum]; unusable input becomes the minimum."""
    if isinstance(value, bool):
        return minimum
    try:
        number = int(value)
    except (TypeError, ValueError):
        return minimum
    if number < minimum:
        return minimum
    return min(number, maximum)


def clamp_word_length(value: Any) -> int:
    return _clamp(value, MIN_WORD_LENGTH, MAX_WORD_LENGTH)


def clamp_max_attempts(value: Any) -> int:
    return _clamp(value, MIN_ATTEMPTS, MAX_ATTEMPTS)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def default_settings() -> Settings:
    return Settings(word_length=DEFAULT_WORD_LENGTH, max_attempts=DEFAULT_MAX_ATTEMPTS)


def resolve_settings(raw: Optional[Mapping[str, Any]], current: Optional[Settings] = None) -> Settings:
    """
    Builds validated Settings from raw input.

    Keys missing from raw keep their current value. max_attempts may be the
    string "infinite", which switches infinite mode on and keeps the current
    attempt count for when it is switched off again.
    """
    current = current or default_settings()
    raw = raw or {}

    word_length = current.word_length
    if 'word_length' in raw:
        word_length = clamp_word_length(raw['word_length'])

    max_attempts = current.max_attempts
    infinite_mode = current.infinite_mode
    if 'max_attempts' in raw:
        value = raw['max_attempts']
        if isinstance(value, str) and value.strip().lower() == INFINITE:
            infinite_mode = True
        else:
            max_attempts = clamp_max_attempts(value)
            infinite_mode = False

    if 'infinite_mode' in raw:
        infinite_mode = _as_bool(raw['infinite_mode'])

    return Settings(word_length=word_length, max_attempts=max_attempts, infinite_mode=infinite_mode)


def new_random_session(settings: Settings, dictionary: WordDictionary,
                       rng: Optional[random.Random] = None) -> GameSession:
    """Starts a non-shared session with a random target of the configured length."""
    target = pick_target(dictionary.words_of_length(settings.word_length), rng)
    return GameSession.new(target, settings, dictionary)


def apply_settings(session: GameSession, settings: Settings, dictionary: WordDictionary,
                   rng: Optional[random.Random] = None) -> GameSession:
    """
    Reducer from (session, settings) to the session that should be active.

    A shared session is returned untouched: the shared word's length governs
    until the player explicitly starts a new game. Otherwise any change of
    settings starts a fresh random session.
    """
    if session.is_shared:
        return session
    if settings == session.settings:
        return session
    return new_random_session(settings, dictionary, rng)
