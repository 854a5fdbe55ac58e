"""
Status Page - Flask Web Application
Public status document plus a Basic-auth admin console to edit it
"""

import os
import logging
from datetime import datetime

from flask import Flask, Response, jsonify, request
from flask_talisman import Talisman
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config, validate_required_config
from .extensions import limiter
from .status import status_bp
from .status.severity import STATUS_OPTIONS, get_message_type_label
from .status.models import utc_timestamp
from .status.store import create_store
from .admin import admin_bp

logger = logging.getLogger(__name__)

# Security logger for audit trail
security_logger = logging.getLogger('security')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config):
    """Configure root and security logging once per process"""
    handlers = [logging.StreamHandler()]
    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(config.log_dir, 'statuspage.log')))

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, handlers=handlers)

    if config.log_dir and not security_logger.handlers:
        security_handler = logging.FileHandler(os.path.join(config.log_dir, 'security.log'))
        security_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        security_logger.addHandler(security_handler)
    security_logger.setLevel(logging.INFO)


# Content Security Policy - inline styles for the console, scripts by nonce only
csp = {
    'default-src': "'self'",
    'style-src': ["'self'", "'unsafe-inline'"],
    'script-src': ["'self'"],
    'img-src': ["'self'", "data:"],
}


def format_timestamp(value):
    """Render an ISO timestamp for the console, or the raw value if it does not parse"""
    if not value:
        return ''
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (TypeError, ValueError):
        return value
    return parsed.strftime('%Y-%m-%d %H:%M:%S UTC')


def format_date(value):
    if not value:
        return ''
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (TypeError, ValueError):
        return value
    return parsed.strftime('%Y-%m-%d')


def create_app(config=None, store=None):
    """
    Build the Flask application.

    Args:
        config: Config instance (read from the environment if omitted)
        store: StatusStore to use (built from config if omitted)

    Returns:
        Flask: the configured app
    """
    config = config or Config()
    configure_logging(config)
    validate_required_config(config)

    app = Flask(__name__)
    app.config.update(config.flask_settings())

    if config.trusted_proxies:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=config.trusted_proxies, x_proto=config.trusted_proxies)

    Talisman(
        app,
        force_https=config.is_production,
        strict_transport_security=config.is_production,
        content_security_policy=csp,
        content_security_policy_nonce_in=['script-src'],
        referrer_policy='strict-origin-when-cross-origin',
        session_cookie_secure=config.is_production,
    )

    limiter.init_app(app)

    app.extensions['statuspage_config'] = config
    app.extensions['status_store'] = store or create_store(config, status_options=STATUS_OPTIONS)

    app.register_blueprint(status_bp)
    app.register_blueprint(admin_bp)

    app.jinja_env.filters['format_timestamp'] = format_timestamp
    app.jinja_env.filters['format_date'] = format_date
    app.jinja_env.filters['message_type_label'] = get_message_type_label

    register_health_routes(app)
    register_error_handlers(app)

    logger.info(f"Status page app created (store={config.status_store}, env={config.env or 'development'})")
    return app


def register_health_routes(app):

    @app.route('/health', provide_automatic_options=False)
    @limiter.exempt  # Health checks should not be rate limited
    def health_check():
        """
        Health check endpoint for load balancers and monitoring.
        Returns 200 if the status store is reachable.
        """
        health_status = {
            'status': 'healthy',
            'timestamp': utc_timestamp(),
            'checks': {}
        }

        try:
            app.extensions['status_store'].ping()
            health_status['checks']['store'] = {'status': 'healthy'}
        except Exception as e:
            health_status['checks']['store'] = {
                'status': 'unhealthy',
                'error': str(e)[:100]  # Truncate error message
            }
            health_status['status'] = 'unhealthy'
            return jsonify(health_status), 503

        return jsonify(health_status), 200


def register_error_handlers(app):

    @app.errorhandler(404)
    def not_found_error(error):
        return Response('Not Found', status=404, mimetype='text/plain')

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        """Unsupported methods on known paths are reported as not found"""
        return Response('Not Found', status=404, mimetype='text/plain')

    @app.errorhandler(429)
    def ratelimit_handler(e):
        """Handle rate limit exceeded"""
        security_logger.warning(
            f"Rate limit exceeded: IP={request.remote_addr} "
            f"endpoint={request.endpoint} "
            f"user_agent={request.user_agent.string[:100]}"
        )
        return Response('Too Many Requests', status=429, mimetype='text/plain')

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {getattr(error, 'original_exception', error)}")
        return Response('Internal Server Error', status=500, mimetype='text/plain')
