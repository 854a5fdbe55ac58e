"""
Status Page Configuration
Reads settings from the environment (and an optional .env file)
"""

import os
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Application settings, resolved once from the environment"""

    def __init__(self, **overrides):
        load_dotenv(os.getenv('STATUSPAGE_ENV_FILE', '.env'))

        self.env = os.getenv('FLASK_ENV', '')
        self.secret_key = os.getenv('SECRET_KEY')

        # Admin credentials
        self.admin_username = os.getenv('ADMIN_USERNAME', 'admin')
        self.admin_password = os.getenv('ADMIN_PASSWORD')
        self.admin_realm = os.getenv('ADMIN_REALM', 'Status Admin')
        self.admin_rate_limit = os.getenv('ADMIN_RATE_LIMIT', '30 per minute')

        # Document storage
        self.status_store = os.getenv('STATUS_STORE', 'redis').lower()
        self.redis_url = os.getenv('REDIS_URL', 'redis://localhost:6379/0')
        self.status_key = os.getenv('STATUS_KEY', 'current')

        # Reverse proxies in front of the app whose X-Forwarded-For is trusted
        self.trusted_proxies = int(os.getenv('TRUSTED_PROXIES', '0'))

        self.ratelimit_enabled = _env_bool('RATELIMIT_ENABLED', True)
        self.ratelimit_storage_uri = os.getenv('RATELIMIT_STORAGE_URI', 'memory://')
        self.csrf_enabled = _env_bool('WTF_CSRF_ENABLED', False)

        # Logging
        self.log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.log_dir = os.getenv('LOG_DIR')

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown config option: {key}")
            setattr(self, key, value)

    @property
    def is_production(self):
        return self.env == 'production'

    def flask_settings(self):
        """Settings copied into app.config"""
        return {
            'SECRET_KEY': self.secret_key or os.urandom(32).hex(),
            'WTF_CSRF_ENABLED': self.csrf_enabled,
            'RATELIMIT_ENABLED': self.ratelimit_enabled,
            'RATELIMIT_STORAGE_URI': self.ratelimit_storage_uri,
            'SESSION_COOKIE_HTTPONLY': True,
            'SESSION_COOKIE_SAMESITE': 'Lax',
            'MAX_CONTENT_LENGTH': 64 * 1024,
        }


def validate_required_config(config):
    """Validate that required configuration is present. Fail fast in production."""
    required = {
        'admin_password': 'ADMIN_PASSWORD: Basic-auth password for the admin console',
        'secret_key': 'SECRET_KEY: Flask secret key',
    }

    missing = [f"  - {description}" for attr, description in required.items()
               if not getattr(config, attr)]
    if not missing:
        return

    error_msg = "\n\nCONFIGURATION ERROR\n" + "=" * 40 + "\n"
    error_msg += "Missing required environment variables:\n" + "\n".join(missing) + "\n"

    if config.is_production:
        logger.critical(error_msg)
        raise RuntimeError(error_msg)
    logger.warning(error_msg)
