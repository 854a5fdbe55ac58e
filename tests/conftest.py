"""
Pytest configuration and fixtures for the status page tests
"""

import base64
import os

import pytest

# Set test environment before importing the app
os.environ['FLASK_ENV'] = 'testing'
os.environ.pop('ADMIN_PASSWORD', None)

from statuspage.app import create_app
from statuspage.config import Config
from statuspage.status.store import MemoryStatusStore
from statuspage.status.severity import STATUS_OPTIONS

TEST_PASSWORD = 'test-password'


def basic_auth(username, password):
    token = base64.b64encode(f'{username}:{password}'.encode('utf-8')).decode('ascii')
    return {'Authorization': f'Basic {token}'}


@pytest.fixture
def config():
    """Test configuration with an in-memory store and no rate limiting"""
    return Config(
        secret_key='test-secret-key-for-testing-only',
        admin_password=TEST_PASSWORD,
        status_store='memory',
        ratelimit_enabled=False,
    )


@pytest.fixture
def store():
    return MemoryStatusStore(status_options=STATUS_OPTIONS)


@pytest.fixture
def app(config, store):
    """Create application for testing"""
    flask_app = create_app(config, store=store)
    flask_app.config.update({
        'TESTING': True,
    })
    yield flask_app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def admin_headers():
    """Headers carrying valid admin credentials"""
    return basic_auth('admin', TEST_PASSWORD)
