"""
Status Routes
Public JSON document consumed by clients
"""

import json

from flask import Response

from . import status_bp
from ..extensions import get_store, limiter


@status_bp.route('/status.json', methods=['GET'], provide_automatic_options=False)
@limiter.exempt  # Polled by every client
def status_json():
    """Current status document, or the default one if nothing is stored"""
    document = get_store().load()

    return Response(
        json.dumps(document.to_dict(), indent=2),
        mimetype='application/json',
        headers={
            'Access-Control-Allow-Origin': '*',
            'Cache-Control': 'no-cache, no-store, must-revalidate'
        }
    )
