import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default='False'):
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


def _token_expiry():
    """Admin tokens never expire unless JWT_ACCESS_TOKEN_EXPIRES_MINUTES is set"""
    minutes = os.getenv('JWT_ACCESS_TOKEN_EXPIRES_MINUTES')
    if minutes:
        return timedelta(minutes=int(minutes))
    return False


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        f"sqlite:///{os.path.join(os.getcwd(), 'instance', 'lapor.db')}"
    )

    # JWT Configuration
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'jwt-secret-key-change-in-production')
    JWT_ACCESS_TOKEN_EXPIRES = _token_expiry()
    JWT_TOKEN_LOCATION = ['headers']
    JWT_HEADER_NAME = 'Authorization'
    JWT_HEADER_TYPE = 'Bearer'

    # File Upload Configuration
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # whole request body
    MAX_ATTACHMENT_BYTES = int(os.getenv('MAX_ATTACHMENT_BYTES', 5 * 1024 * 1024))
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join(os.getcwd(), 'uploads'))
    ATTACHMENT_STORAGE = os.getenv('ATTACHMENT_STORAGE', 'local')  # local | inline
    COMPRESS_UPLOADS = _env_flag('COMPRESS_UPLOADS', 'True')
    PUBLIC_BASE_URL = os.getenv('PUBLIC_BASE_URL', '')

    # Validation
    REQUIRE_ID_NUMBER = _env_flag('REQUIRE_ID_NUMBER', 'True')
    PHONE_ALLOW_SEPARATORS = _env_flag('PHONE_ALLOW_SEPARATORS')
    ENFORCE_STATUS_TRANSITIONS = _env_flag('ENFORCE_STATUS_TRANSITIONS')

    # Rate limiting
    RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', 'True')
    RATELIMIT_DEFAULT = os.getenv('RATELIMIT_DEFAULT', '300 per hour')
    ADMIN_LOGIN_LIMIT = os.getenv('ADMIN_LOGIN_LIMIT', '20 per hour')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_DIR = os.getenv('LOG_DIR')

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 280,
    }

    CORS_ORIGINS = [
        os.getenv('FRONTEND_URL', 'http://localhost:5173'),
        'http://localhost:4173',
        'https://laporan-kappa.vercel.app',
    ]


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SQLALCHEMY_ECHO = False

    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SQLALCHEMY_ECHO = False
    JWT_SECRET_KEY = 'testing-jwt-secret-key-with-enough-length-for-hs256'
    RATELIMIT_ENABLED = False
    COMPRESS_UPLOADS = False
    ATTACHMENT_STORAGE = 'local'
    REQUIRE_ID_NUMBER = True
    PHONE_ALLOW_SEPARATORS = False
    ENFORCE_STATUS_TRANSITIONS = False
    LOG_DIR = None


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
