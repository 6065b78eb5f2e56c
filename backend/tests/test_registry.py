"""Tests for the section registry lookups."""

from __future__ import annotations

from storefront.domain.registry import (
    FALLBACK_RENDERER,
    SectionType,
    describe,
    is_known_type,
    renderer_for,
    type_label,
)


class TestDescribe:
    def test_known_type_has_defaults(self):
        described = describe("featured")
        assert described["default_settings"]["itemsPerRow"] == 4
        assert described["default_animations"] == {
            "entrance": "fadeIn",
            "duration": 600,
            "delay": 0,
        }

    def test_unknown_type_falls_back_to_empty_settings(self):
        described = describe("hologram")
        assert described["default_settings"] == {}
        assert described["default_animations"]["entrance"] == "fadeIn"

    def test_non_string_type_does_not_raise(self):
        assert describe(None)["default_settings"] == {}

    def test_returns_fresh_copies(self):
        first = describe("hero")
        first["default_settings"]["title"] = "changed"
        first["default_animations"]["delay"] = 999
        second = describe("hero")
        assert second["default_settings"]["title"] == "Welcome to Our Store"
        assert second["default_animations"]["delay"] == 0


class TestRendererFor:
    def test_catalog_backed_types_name_their_data_source(self):
        assert renderer_for("categories").data_source == "catalog.categories"
        assert renderer_for("sliders").data_source == "banners.sliders"

    def test_unknown_type_gets_placeholder(self):
        assert renderer_for("hologram") is FALLBACK_RENDERER
        assert renderer_for("hologram").fallback is True

    def test_known_type_without_renderer_gets_placeholder(self):
        # in the closed set, but no presentation unit ships for it
        assert is_known_type("chat")
        assert renderer_for("chat").fallback is True

    def test_renderer_for_every_drawn_type_is_not_fallback(self):
        for section_type in ("hero", "text", "video", "new-arrivals", "spacer"):
            assert renderer_for(section_type).fallback is False


class TestTypes:
    def test_closed_enumeration_contains_storefront_types(self):
        values = {t.value for t in SectionType}
        assert {"hero", "carousel-with-side-banners", "new-arrivals", "side-banners"} <= values

    def test_is_known_type(self):
        assert is_known_type("hero")
        assert not is_known_type("hologram")

    def test_type_label(self):
        assert type_label("new-arrivals") == "New Arrivals"
        assert type_label("hero") == "Hero"
