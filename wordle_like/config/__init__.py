"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word dictionary loader
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    BLANK_CELL, EMPTY_CELL, INFINITE,
    MIN_WORD_LENGTH, MAX_WORD_LENGTH, MIN_ATTEMPTS, MAX_ATTEMPTS,
    load_word_dictionary, validate_word_dictionary_integrity, get_word_statistics,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'BLANK_CELL', 'EMPTY_CELL', 'INFINITE',
    'MIN_WORD_LENGTH', 'MAX_WORD_LENGTH', 'MIN_ATTEMPTS', 'MAX_ATTEMPTS',
    'load_word_dictionary', 'validate_word_dictionary_integrity', 'get_word_statistics',
]
