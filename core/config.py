"""
OAuth2 Client Application Configuration
Environment-aware configuration supporting development, staging, and production modes
"""
import os
import logging

from core.registrations import load_registrations, DEFAULT_REGISTRATION_ID, authorization_path


class EnvironmentConfig:
    """Centralized environment configuration"""

    def __init__(self):
        self.ENVIRONMENT = os.getenv('ENVIRONMENT', 'development').lower()

    @property
    def is_development(self):
        return self.ENVIRONMENT == 'development'

    @property
    def is_production(self):
        return self.ENVIRONMENT == 'production'

    @property
    def enable_docs(self):
        """Expose OpenAPI docs outside production"""
        return not self.is_production

    @property
    def debug_mode(self):
        """Enable debug mode in development"""
        return self.is_development


# Global instance
config = EnvironmentConfig()

# Storage configuration
STORAGE_PATH = os.environ.get('STORAGE_PATH', os.path.join(os.path.dirname(os.path.dirname(__file__)), 'storage'))
LOGS_DIR = os.path.join(STORAGE_PATH, "logs")
LOG_FILE = os.path.join(LOGS_DIR, "oauth2-client.log")

os.makedirs(LOGS_DIR, exist_ok=True)

# Web assets
WEB_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'web')
TEMPLATES_DIR = os.path.join(WEB_DIR, 'templates')
STATIC_DIR = os.path.join(WEB_DIR, 'static')

# Setup logging
logger = logging.getLogger("oauth2_client")
logger.setLevel(logging.DEBUG if config.debug_mode else logging.INFO)

if not logger.handlers:
    # Console handler
    c_handler = logging.StreamHandler()
    c_handler.setLevel(logging.DEBUG if config.debug_mode else logging.INFO)

    # File handler
    f_handler = logging.FileHandler(LOG_FILE)
    f_handler.setLevel(logging.INFO)

    # Formatter
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    c_handler.setFormatter(formatter)
    f_handler.setFormatter(formatter)

    logger.addHandler(c_handler)
    logger.addHandler(f_handler)

# Security configuration
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
SESSION_COOKIE = os.environ.get('SESSION_COOKIE', 'oauth2_client_session')
CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*").split(",")

# Application configuration
APP_NAME = os.environ.get('APP_NAME', 'OAuth2 Client Application')
APP_DOMAIN = os.environ.get('APP_DOMAIN', 'localhost:8080')
HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', 8080))

# View rendered for the login page
LOGIN_VIEW = os.environ.get('LOGIN_VIEW', 'index')

# OAuth2 client registrations
REGISTRATIONS = load_registrations(os.environ, app_domain=APP_DOMAIN)
AUTHORIZATION_PATH = authorization_path(DEFAULT_REGISTRATION_ID)

logger.info(f"{APP_NAME} configuration initialized - Environment: {config.ENVIRONMENT}")
logger.info(f"Client registrations: {', '.join(REGISTRATIONS) or 'none'}")
logger.info(f"Debug mode: {'Enabled' if config.debug_mode else 'Disabled'}")
