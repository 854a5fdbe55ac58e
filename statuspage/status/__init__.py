"""
Status Blueprint
Public machine-readable system status
"""

from flask import Blueprint

status_bp = Blueprint('status', __name__)

from . import routes
from .models import StatusDocument, Component, DeveloperMessage
from .store import StatusStore, RedisStatusStore, MemoryStatusStore, StatusStoreError
