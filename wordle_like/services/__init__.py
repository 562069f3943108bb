"""
Services Package

Contains the game engine and the service that manages game sessions.
"""

from .dictionary import WordDictionary, pick_target
from .feedback import is_win, score
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .keyboard import apply_feedback, full_keyboard
from .settings_policy import apply_settings, clamp_max_attempts, clamp_word_length, resolve_settings
from .share_codec import decode_word, encode_word

__all__ = [
    'WordDictionary', 'pick_target',
    'score', 'is_win',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession',
    'apply_feedback', 'full_keyboard',
    'apply_settings', 'clamp_max_attempts', 'clamp_word_length', 'resolve_settings',
    'encode_word', 'decode_word',
]
