"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_LENGTH, DEFAULT_WORD_LIST_PATH

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(value):
    return int(value) if value not in (None, '') else None


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Dictionary Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', DEFAULT_WORD_LIST_PATH)

    # Game Settings
    DEFAULT_WORD_LENGTH = int(os.getenv('DEFAULT_WORD_LENGTH', DEFAULT_WORD_LENGTH))
    DEFAULT_MAX_ATTEMPTS = int(os.getenv('DEFAULT_MAX_ATTEMPTS', DEFAULT_MAX_ATTEMPTS))
    DEFAULT_INFINITE_MODE = os.getenv('DEFAULT_INFINITE_MODE', 'False').lower() == 'true'
    RANDOM_SEED = _optional_int(os.getenv('RANDOM_SEED'))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    RANDOM_SEED = 0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
