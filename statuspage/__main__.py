"""
Development server
    python -m statuspage
"""

import os

from .app import create_app


def main():
    app = create_app()
    app.run(
        host=os.getenv('STATUSPAGE_HOST', '127.0.0.1'),
        port=int(os.getenv('STATUSPAGE_PORT', '5000')),
        debug=os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
    )


if __name__ == '__main__':
    main()
