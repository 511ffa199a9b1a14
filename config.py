"""
StudyDoc Configuration
Defaults work out of the box; every option can be overridden from the environment.
"""
import os
import tempfile
from functools import lru_cache


def _max_upload_bytes(default_mb: int = 50):
    """MAX_UPLOAD_MB from the environment, 0 disables the limit"""
    raw = os.environ.get("MAX_UPLOAD_MB", "").strip()
    try:
        mb = int(raw) if raw else default_mb
    except ValueError:
        mb = default_mb
    return mb * 1024 * 1024 if mb > 0 else None


class Config:
    """Base configuration"""
    # Server
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "5000"))

    # File uploads
    UPLOAD_FOLDER = os.environ.get(
        "UPLOAD_FOLDER", os.path.join(tempfile.gettempdir(), "studydoc_uploads")
    )
    MAX_CONTENT_LENGTH = _max_upload_bytes()

    # Extraction
    PDF_ENGINE = os.environ.get("PDF_ENGINE", "pypdf2")
    FORMAT_POLICY = os.environ.get("FORMAT_POLICY", "declared")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # App Version
    APP_VERSION = os.environ.get("APP_VERSION", "2026.10")
    BUILD_TIME = os.environ.get("BUILD_TIME", "")
    GIT_COMMIT = os.environ.get("GIT_COMMIT", "")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    PDF_ENGINE = "pypdf2"
    FORMAT_POLICY = "declared"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


@lru_cache()
def get_config(env: str = None):
    """Get configuration by environment name"""
    env = env or os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
