"""
Configuration settings for RENOVAAPP
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    INSTANCE_DIR = os.path.join(basedir, 'instance')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(INSTANCE_DIR, 'renovaapp.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session cookie
    SESSION_COOKIE_NAME = '__session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False

    # Application settings
    ADMIN_PROFILE = 'Administrador'
    DEFAULT_PROFILES = ('Administrador', 'Usuário')
    SAMPLE_ROW_LIMIT = 10
    EXPORT_FORMAT = (os.environ.get('EXPORT_FORMAT') or 'csv').lower()
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class ProductionConfig(Config):
    """Production configuration: the session secret must come from the environment"""
    SECRET_KEY = os.environ.get('SECRET_KEY')
    SESSION_COOKIE_SECURE = True


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    EXPORT_FORMAT = 'csv'


def get_config():
    """Pick the configuration class from APP_ENV."""
    if os.environ.get('APP_ENV', '').lower() == 'production':
        return ProductionConfig
    return Config
