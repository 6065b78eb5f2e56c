def normalize_section(section, admin=False):
    data = {
        "id": section.get("id"),
        "type": section.get("type"),
        "order": section.get("order"),
        "settings": section.get("settings") or {},
        "animations": section.get("animations"),
    }

    if admin:
        # Unknown top-level keys from imports are passed back untouched
        extra = {
            key: value
            for key, value in section.items()
            if key not in data
        }
        data.update(extra)
        data.setdefault("title", "")
        data.setdefault("enabled", False)

    return data
