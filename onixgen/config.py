"""Configuration module for the application"""
import os

from .utils.onix_constants import DEFAULT_DIALECT, DEFAULT_SENDER_NAME


class Config:
    """Base configuration class"""
    # Application
    APP_NAME = 'ONIXGen'

    # Flask configuration
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-please-change'
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max request size

    # Export limits
    MAX_PRODUCTS_PER_REQUEST = int(os.environ.get('MAX_PRODUCTS_PER_REQUEST', 500))

    # ONIX defaults, overridable per request
    ONIX_DIALECT = os.environ.get('ONIX_DIALECT', DEFAULT_DIALECT)
    ONIX_SENDER_NAME = os.environ.get('ONIX_SENDER_NAME', DEFAULT_SENDER_NAME)
    ONIX_CONTACT_NAME = os.environ.get('ONIX_CONTACT_NAME')
    ONIX_EMAIL = os.environ.get('ONIX_EMAIL')
    ONIX_LANGUAGE_CODE = os.environ.get('ONIX_LANGUAGE_CODE')
    ONIX_ASSET_HOST = os.environ.get('ONIX_ASSET_HOST')

    # Logging configuration
    LOG_FILE = 'logs/onixgen.log'
    LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_MAX_BYTES = 10240
    LOG_BACKUP_COUNT = 10

    @staticmethod
    def init_app(app):
        """Initialize application configuration"""
        log_dir = os.path.dirname(app.config['LOG_FILE'])
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        import logging
        logging.basicConfig(level=logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = False
    TESTING = True

    PRESERVE_CONTEXT_ON_EXCEPTION = False
    MAX_PRODUCTS_PER_REQUEST = 5
    ONIX_SENDER_NAME = 'Test Sender'

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    SECRET_KEY = os.environ.get('SECRET_KEY')

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Handle proxy server headers
        from werkzeug.middleware.proxy_fix import ProxyFix
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
