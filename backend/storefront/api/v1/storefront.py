from flask import jsonify, current_app
from storefront.rendering.dispatcher import build_render_plan
from storefront.utils.decorators import editor_required
from . import v1_bp


@v1_bp.route("/storefront/page", methods=["GET"])
@editor_required
def storefront_page(editor):
    """Public page: enabled sections in order, each with its renderer."""
    resolvers = current_app.config.get("LAYOUT_DATA_RESOLVERS") or {}
    plan = build_render_plan(editor.store.sections, resolvers=resolvers)

    return jsonify({
        "sections": plan,
        "count": len(plan),
    })
