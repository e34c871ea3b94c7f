"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Vocabulary Settings
    WORDS_FILE = os.getenv('WORDS_FILE', './words.txt')
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 5))

    # Definition Lookup Settings
    DEFINITION_API_URL = os.getenv(
        'DEFINITION_API_URL', 'https://api.dictionaryapi.dev/api/v2/entries/en/{word}'
    )
    DEFINITION_TIMEOUT_SECONDS = float(os.getenv('DEFINITION_TIMEOUT_SECONDS', 5))
    FETCH_DEFINITIONS = os.getenv('FETCH_DEFINITIONS', 'True').lower() == 'true'

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
    FETCH_DEFINITIONS = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
