"""
Shared Flask extensions and request helpers
"""

from flask import current_app, request
from flask_limiter import Limiter


def get_real_ip():
    """
    Client IP for rate limiting.

    X-Forwarded-For is only honoured through ProxyFix, which create_app
    installs when TRUSTED_PROXIES > 0; otherwise this is the socket peer.
    """
    return request.remote_addr


limiter = Limiter(key_func=get_real_ip)


def get_store():
    """The status store attached to the current app"""
    return current_app.extensions['status_store']


def get_config():
    return current_app.extensions['statuspage_config']
