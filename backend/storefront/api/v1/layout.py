# storefront/api/v1/layout.py
from flask import request, jsonify, Response
from storefront.application.layout.add_section import add_section
from storefront.application.layout.update_section import update_section
from storefront.application.layout.delete_section import delete_section
from storefront.application.layout.duplicate_section import duplicate_section
from storefront.application.layout.move_section import move_section
from storefront.application.layout.reorder_sections import reorder_sections
from storefront.application.layout.bulk_action import bulk_action
from storefront.application.layout.apply_template import (
    apply_layout_template,
    append_component_template,
)
from storefront.application.layout.export_layout import (
    export_filename,
    export_sections,
    export_theme,
)
from storefront.application.layout.import_layout import import_sections
from storefront.application.layout.query_sections import search_sections
from storefront.application.layout.history import undo, redo
from storefront.domain.templates import COMPONENT_TEMPLATES, LAYOUT_TEMPLATES
from storefront.normalizers.activity import normalize_activity
from storefront.normalizers.layout import normalize_layout
from storefront.normalizers.section import normalize_section
from storefront.utils.decorators import editor_required
from storefront.utils.timestamps import parse_timestamp
from . import v1_bp


def _flag(value):
    return str(value).lower() in ("1", "true", "yes", "on")

# ------------------------
# Layout
# ------------------------

@v1_bp.route("/layout", methods=["GET"])
@editor_required
def get_layout(editor):
    return jsonify(normalize_layout(editor))

@v1_bp.route("/layout/save", methods=["POST"])
@editor_required
def save_layout(editor):
    # PersistenceError is mapped to 503 by the error handlers
    editor.save()
    return jsonify({
        "message": "Page layout saved",
        "last_saved_at": editor.store.last_saved_at.isoformat(),
    }), 200

@v1_bp.route("/layout/undo", methods=["POST"])
@editor_required
def undo_layout(editor):
    changed = undo(editor=editor)
    return jsonify({"changed": changed, **normalize_layout(editor)})

@v1_bp.route("/layout/redo", methods=["POST"])
@editor_required
def redo_layout(editor):
    changed = redo(editor=editor)
    return jsonify({"changed": changed, **normalize_layout(editor)})

@v1_bp.route("/layout/order", methods=["PUT"])
@editor_required
def reorder_layout(editor):
    data = request.get_json(silent=True) or {}
    ids = data.get("ids")

    if not isinstance(ids, list):
        return jsonify({"error": "ids must be a list of section ids"}), 400

    sections = reorder_sections(editor=editor, section_ids=ids)
    return jsonify({
        "sections": [normalize_section(s, admin=True) for s in sections]
    })

# ------------------------
# Sections
# ------------------------

@v1_bp.route("/layout/sections", methods=["GET"])
@editor_required
def list_sections(editor):
    sections = search_sections(
        editor.store.sections,
        term=request.args.get("q"),
        filter_by=request.args.get("filter", "all"),
    )
    return jsonify({
        "items": [normalize_section(s, admin=True) for s in sections],
        "count": len(sections),
    })

@v1_bp.route("/layout/sections", methods=["POST"])
@editor_required
def create_section(editor):
    data = request.get_json(silent=True) or {}

    try:
        if isinstance(data.get("section"), dict):
            section = add_section(editor=editor, section=data["section"])
        else:
            section = add_section(
                editor=editor,
                section_type=data.get("type"),
                title=data.get("title"),
            )
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify(normalize_section(section, admin=True)), 201

@v1_bp.route("/layout/sections/<section_id>", methods=["GET"])
@editor_required
def get_section(editor, section_id):
    section = editor.store.get(section_id)
    if section is None:
        return jsonify({"error": "Section not found"}), 404

    return jsonify(normalize_section(section, admin=True))

@v1_bp.route("/layout/sections/<section_id>", methods=["PATCH"])
@editor_required
def patch_section(editor, section_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    found = update_section(editor=editor, section_id=section_id, data=data)
    section = editor.store.get(section_id)

    return jsonify({
        "updated": found,
        "section": normalize_section(section, admin=True) if section else None,
    })

@v1_bp.route("/layout/sections/<section_id>", methods=["DELETE"])
@editor_required
def remove_section(editor, section_id):
    deleted = delete_section(editor=editor, section_id=section_id)
    return jsonify({"deleted": deleted}), 200

@v1_bp.route("/layout/sections/<section_id>/duplicate", methods=["POST"])
@editor_required
def duplicate(editor, section_id):
    section = duplicate_section(editor=editor, section_id=section_id)
    if section is None:
        return jsonify({"duplicated": False, "section": None}), 200

    return jsonify({
        "duplicated": True,
        "section": normalize_section(section, admin=True),
    }), 201

@v1_bp.route("/layout/sections/<section_id>/move", methods=["POST"])
@editor_required
def move(editor, section_id):
    data = request.get_json(silent=True) or {}

    try:
        moved = move_section(
            editor=editor,
            section_id=section_id,
            direction=data.get("direction", ""),
        )
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({"moved": moved})

# ------------------------
# Bulk
# ------------------------

@v1_bp.route("/layout/bulk", methods=["POST"])
@editor_required
def bulk(editor):
    data = request.get_json(silent=True) or {}
    ids = data.get("ids")

    if not isinstance(ids, list):
        return jsonify({"error": "ids must be a list of section ids"}), 400

    try:
        result = bulk_action(
            editor=editor,
            section_ids=ids,
            action=data.get("action", ""),
            confirmed=data.get("confirm") is True,
        )
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify(result)

# ------------------------
# Templates
# ------------------------

@v1_bp.route("/layout/templates", methods=["GET"])
def list_templates():
    return jsonify({
        "layouts": [
            {
                "id": template_id,
                "name": t["name"],
                "description": t["description"],
                "category": t["category"],
                "sections": len(t["sections"]),
            }
            for template_id, t in LAYOUT_TEMPLATES.items()
        ],
        "components": [
            {
                "id": template_id,
                "name": t["name"],
                "type": t["type"],
                "category": t["category"],
                "tags": t["tags"],
            }
            for template_id, t in COMPONENT_TEMPLATES.items()
        ],
    })

@v1_bp.route("/layout/templates/<template_id>/apply", methods=["POST"])
@editor_required
def apply_template(editor, template_id):
    # UnknownTemplateError is mapped to 404
    apply_layout_template(editor=editor, template_id=template_id)
    return jsonify(normalize_layout(editor))

@v1_bp.route("/layout/templates/<template_id>/append", methods=["POST"])
@editor_required
def append_template(editor, template_id):
    section = append_component_template(editor=editor, template_id=template_id)
    return jsonify(normalize_section(section, admin=True)), 201

# ------------------------
# Import / export
# ------------------------

@v1_bp.route("/layout/export", methods=["GET"])
@editor_required
def export_layout(editor):
    sections = editor.store.sections

    if _flag(request.args.get("theme")):
        body = export_theme(sections, name=request.args.get("name") or "Custom Store Theme")
        filename = export_filename("store-theme")
    else:
        ids = [i for i in request.args.get("ids", "").split(",") if i]
        body = export_sections(sections, ids)
        filename = export_filename("components-export")

    return Response(
        body,
        mimetype="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

@v1_bp.route("/layout/import", methods=["POST"])
@editor_required
def import_layout(editor):
    upload = request.files.get("file")

    if upload and not (upload.filename or "").lower().endswith(".json"):
        return jsonify({"error": "Only .json files can be imported"}), 400

    raw = upload.read() if upload else request.get_data()

    # LayoutImportError is mapped to 400; nothing was applied
    imported = import_sections(
        editor=editor,
        raw=raw,
        replace=_flag(request.args.get("replace")),
    )

    return jsonify({
        "imported": len(imported),
        "sections": [normalize_section(s, admin=True) for s in imported],
    }), 201

# ------------------------
# Activity
# ------------------------

@v1_bp.route("/layout/activity", methods=["GET"])
@editor_required
def list_activity(editor):
    limit = max(0, min(request.args.get("limit", 50, type=int), 50))
    since = request.args.get("since")

    try:
        since_ts = parse_timestamp(since) if since else None
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify(normalize_activity(editor.activity.recent(limit=limit, since=since_ts)))
