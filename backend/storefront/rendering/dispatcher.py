# storefront/rendering/dispatcher.py
from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from storefront.domain.registry import renderer_for

logger = logging.getLogger(__name__)

Resolver = Callable[[Dict[str, Any]], Any]

DEFAULT_ENTRANCE = "fadeIn"
DEFAULT_DURATION_MS = 600
DEFAULT_DELAY_MS = 0


def animation_style(animations: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    animations = animations or {}
    return {
        "animationName": animations.get("entrance") or DEFAULT_ENTRANCE,
        "animationDuration": f"{animations.get('duration') or DEFAULT_DURATION_MS}ms",
        "animationDelay": f"{animations.get('delay') or DEFAULT_DELAY_MS}ms",
        "animationFillMode": "both",
    }


def _sort_key(section: Mapping[str, Any]):
    order = section.get("order")
    return order if isinstance(order, (int, float)) else float("inf")


def build_render_plan(
    sections: Iterable[Mapping[str, Any]],
    *,
    resolvers: Optional[Mapping[str, Resolver]] = None,
    include_fallback: bool = True,
) -> List[Dict[str, Any]]:
    """
    Project a layout into the ordered list of units the storefront draws.

    Steps:
    - keep sections whose ``enabled`` is exactly True
    - sort ascending by ``order`` (stable; sections without one go last)
    - pick each renderer from the registry; unknown types get the
      placeholder renderer, or are dropped when ``include_fallback`` is off
    - forward settings/animations/responsive verbatim
    - fetch collaborator data per unit; a failing resolver only blanks
      that unit's ``data``

    Never mutates its input.
    """
    resolvers = resolvers or {}
    visible = sorted(
        (s for s in sections if s.get("enabled") is True),
        key=_sort_key,
    )

    plan: List[Dict[str, Any]] = []
    for section in visible:
        renderer = renderer_for(section.get("type"))
        if renderer.fallback and not include_fallback:
            continue

        unit = {
            "id": section.get("id"),
            "type": section.get("type"),
            "component": renderer.component,
            "data_source": renderer.data_source,
            "fallback": renderer.fallback,
            "settings": copy.deepcopy(section.get("settings") or {}),
            "animations": copy.deepcopy(section.get("animations")),
            "responsive": copy.deepcopy(section.get("responsive")),
            "style": animation_style(section.get("animations")),
            "data": None,
        }

        resolver = resolvers.get(renderer.data_source) if renderer.data_source else None
        if resolver is not None:
            try:
                unit["data"] = resolver(copy.deepcopy(dict(section)))
            except Exception as exc:
                logger.warning(
                    f"Data source '{renderer.data_source}' failed for section {unit['id']}: {exc}"
                )

        plan.append(unit)

    return plan
