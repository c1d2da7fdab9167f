import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Base configuration class"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB per uploaded menu file
    MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 1024 * 1024  # room for multipart overhead

    # Upload settings
    ALLOWED_TEXT_MIMES = {"text/plain"}
    ALLOWED_IMAGE_MIME_PREFIX = "image/"

    # Capability settings
    CAPABILITY_PROVIDER = os.getenv("CAPABILITY_PROVIDER", "gemini").lower()
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    CAPABILITY_TIMEOUT_S = float(os.getenv("CAPABILITY_TIMEOUT_S", "30"))

    # Model settings
    DEFAULT_MODEL = os.getenv("DEFAULT_MODEL", "gemini-2.5-flash")
    DEFAULT_OPENAI_MODEL = os.getenv("DEFAULT_OPENAI_MODEL", "gpt-4o")

    # Image lookup settings
    IMAGE_PROVIDER = os.getenv("IMAGE_PROVIDER", "keyword").lower()
    IMAGE_LOOKUP_TIMEOUT_S = float(os.getenv("IMAGE_LOOKUP_TIMEOUT_S", "2"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def init_app(app):
        """Initialize app with configuration"""
        logging.basicConfig(
            level=app.config.get("LOG_LEVEL", "INFO"),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    GEMINI_API_KEY = "test-key"
    OPENAI_API_KEY = "test-key"
    CAPABILITY_TIMEOUT_S = 5.0
    IMAGE_LOOKUP_TIMEOUT_S = 1.0


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
