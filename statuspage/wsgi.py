"""
WSGI entry point for gunicorn
    gunicorn -c statuspage/gunicorn.conf.py statuspage.wsgi:app
"""

from .app import create_app

app = create_app()
