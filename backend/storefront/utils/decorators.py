from functools import wraps
from flask import g, jsonify
from storefront.extensions import editors

def editor_required(fn):
    """Resolve the layout editor of the current store and pass it as ``editor``."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        store_id = getattr(g, "store_id", None)
        if not store_id:
            return jsonify({"error": "Store context missing"}), 400

        kwargs["editor"] = editors.get(store_id)
        return fn(*args, **kwargs)
    return wrapper
