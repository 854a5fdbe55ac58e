"""
Gunicorn settings for the status page
    gunicorn -c statuspage/gunicorn.conf.py statuspage.wsgi:app
"""

import os

bind = os.getenv('GUNICORN_BIND', '127.0.0.1:5000')

# Requests are short JSON/HTML renders against one Redis key
workers = int(os.getenv('GUNICORN_WORKERS', '2'))
timeout = int(os.getenv('GUNICORN_TIMEOUT', '15'))

accesslog = os.getenv('GUNICORN_ACCESS_LOG', '-')
errorlog = os.getenv('GUNICORN_ERROR_LOG', '-')
loglevel = os.getenv('GUNICORN_LOG_LEVEL', 'info')

proc_name = 'statuspage'
