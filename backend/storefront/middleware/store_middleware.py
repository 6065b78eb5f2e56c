import re
from flask import request, g, jsonify

STORE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
PUBLIC_PATHS = {"/api/v1/health"}


def store_middleware(app):
    @app.before_request
    def load_store():
        if not request.path.startswith("/api/") or request.path in PUBLIC_PATHS:
            return None

        store_id = request.headers.get("X-Store-ID")
        if not store_id:
            return jsonify({"error": "X-Store-ID header is missing"}), 400

        if not STORE_ID_PATTERN.match(store_id):
            return jsonify({"error": "Invalid store id"}), 400

        # Attach store to global context
        g.store_id = store_id
