"""
Configuration management for the blog backend.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BACKENDS = ('memory', 'mongo')

DEFAULT_STATIC_FOLDER = os.path.join(os.path.dirname(__file__), 'view', 'build')


class ConfigurationError(Exception):
    """Raised when configuration values are invalid."""
    pass


class Config:
    """Configuration class for application settings."""

    # Server Configuration
    BACKEND = os.getenv('BLOG_BACKEND', 'mongo').lower()
    HOST = os.getenv('BLOG_HOST', '0.0.0.0')
    PORT = os.getenv('BLOG_PORT', '8000')
    DEBUG = os.getenv('BLOG_DEBUG', 'False').lower() == 'true'

    # MongoDB Configuration
    MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017')
    MONGODB_DB = os.getenv('MONGODB_DB', 'my-blog')
    MONGODB_COLLECTION = os.getenv('MONGODB_COLLECTION', 'articles')

    # Frontend bundle served for non-API routes
    STATIC_FOLDER = os.getenv('STATIC_FOLDER', DEFAULT_STATIC_FOLDER)

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    @classmethod
    def validate(cls):
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If a value is missing or malformed
        """
        if cls.BACKEND not in BACKENDS:
            raise ConfigurationError(
                f"Unknown BLOG_BACKEND '{cls.BACKEND}'. "
                f"Expected one of: {', '.join(BACKENDS)}."
            )

        try:
            int(cls.PORT)
        except (TypeError, ValueError):
            raise ConfigurationError(f"BLOG_PORT must be an integer, got '{cls.PORT}'.")

    @classmethod
    def as_flask_config(cls) -> dict:
        """Settings in the shape the Flask app factory expects."""
        return {
            'BACKEND': cls.BACKEND,
            'MONGODB_URI': cls.MONGODB_URI,
            'DATABASE_NAME': cls.MONGODB_DB,
            'COLLECTION_NAME': cls.MONGODB_COLLECTION,
            'STATIC_FOLDER': cls.STATIC_FOLDER,
        }
