"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import game_endpoint
from .helpers import get_user_identity, get_json_body
from .game_logger import game_logger

__all__ = ['game_endpoint', 'get_user_identity', 'get_json_body', 'game_logger']
