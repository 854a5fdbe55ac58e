"""
Status Page
Machine-readable system status with a Basic-auth admin console
"""

__version__ = '1.0.0'

from .app import create_app

__all__ = ['create_app', '__version__']
