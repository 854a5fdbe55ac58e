"""
Admin Access Control
HTTP Basic authentication against a single shared credential pair
"""

import base64
import binascii
import hmac
import logging
from functools import wraps

from flask import Response, request

from ..extensions import get_config

# Security logger for audit trail
security_logger = logging.getLogger('security')


def parse_basic_auth(header):
    """
    Extract credentials from an Authorization header.

    Args:
        header: raw Authorization header value

    Returns:
        tuple: (username, password), or None if the header is not valid Basic auth
    """
    if not header or not header.startswith('Basic '):
        return None

    try:
        decoded = base64.b64decode(header[6:].strip(), validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, sep, password = decoded.partition(':')
    if not sep:
        return None
    return username, password


def check_credentials(credentials, username, password):
    """Case-sensitive, constant-time match against the configured pair"""
    if credentials is None or not password:
        return False
    given_user, given_password = credentials
    user_ok = hmac.compare_digest(given_user.encode('utf-8'), username.encode('utf-8'))
    password_ok = hmac.compare_digest(given_password.encode('utf-8'), password.encode('utf-8'))
    return user_ok and password_ok


def unauthorized_response(realm):
    return Response(
        'Unauthorized',
        status=401,
        mimetype='text/plain',
        headers={'WWW-Authenticate': f'Basic realm="{realm}"'}
    )


def basic_auth_required(f):
    """Require the admin credentials, otherwise answer with a Basic challenge"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        config = get_config()
        credentials = parse_basic_auth(request.headers.get('Authorization'))

        if not check_credentials(credentials, config.admin_username, config.admin_password):
            security_logger.warning(
                f"ADMIN_AUTH_FAILED: {request.method} {request.path} "
                f"user={credentials[0] if credentials else '-'} "
                f"IP={request.remote_addr}"
            )
            return unauthorized_response(config.admin_realm)
        return f(*args, **kwargs)
    return decorated_function
