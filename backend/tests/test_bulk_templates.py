"""Tests for the section use cases: bulk actions, templates, moves and edits."""

from __future__ import annotations

import pytest

from storefront.application.layout.add_section import add_section
from storefront.application.layout.apply_template import (
    append_component_template,
    apply_layout_template,
)
from storefront.application.layout.bulk_action import bulk_action
from storefront.application.layout.delete_section import delete_section
from storefront.application.layout.duplicate_section import duplicate_section
from storefront.application.layout.history import redo, undo
from storefront.application.layout.move_section import move_section
from storefront.application.layout.query_sections import search_sections, summarize_layout
from storefront.application.layout.reorder_sections import reorder_sections
from storefront.application.layout.update_section import update_section
from storefront.domain.exceptions import UnknownTemplateError
from storefront.domain.invariants.exceptions import InvariantViolation
from storefront.domain.registry import describe


@pytest.fixture()
def layout(editor, three_sections):
    return editor


def ids(store):
    return [s["id"] for s in store.sections]


class TestBulkDuplicate:
    def test_sequential_append_order(self, layout):
        result = bulk_action(editor=layout, section_ids=["one", "three"], action="duplicate")

        sections = layout.store.sections
        assert len(sections) == 5
        assert result["count"] == 2
        assert result["selection"] == []

        dup_one, dup_three = sections[3], sections[4]
        assert dup_one["order"] == 3
        assert dup_three["order"] == 4
        assert dup_one["title"] == "One (Copy)"
        assert dup_three["title"] == "Three (Copy)"
        assert result["created"] == [dup_one["id"], dup_three["id"]]
        assert len({s["id"] for s in sections}) == 5

    def test_copies_are_deep(self, layout):
        bulk_action(editor=layout, section_ids=["one"], action="duplicate")
        copy_id = layout.store.sections[-1]["id"]

        layout.store.update(copy_id, {"settings": {"title": "changed"}})
        assert layout.store.get("one")["settings"] == {"title": "one heading"}

    def test_duplicates_follow_layout_order_not_selection_order(self, layout):
        bulk_action(editor=layout, section_ids=["three", "one"], action="duplicate")
        titles = [s["title"] for s in layout.store.sections[3:]]
        assert titles == ["One (Copy)", "Three (Copy)"]


class TestBulkToggle:
    def test_disable_skips_sections_already_disabled(self, layout):
        layout.store.update("two", {"enabled": False})

        result = bulk_action(editor=layout, section_ids=["one", "two"], action="disable")

        assert result["affected"] == ["one"]
        assert [s["enabled"] for s in layout.store.sections] == [False, False, True]

    def test_enable(self, layout):
        bulk_action(editor=layout, section_ids=["one", "two", "three"], action="disable")
        result = bulk_action(editor=layout, section_ids=["two"], action="enable")

        assert result["count"] == 1
        assert layout.store.get("two")["enabled"] is True

    def test_no_op_batch_leaves_history_alone(self, layout):
        result = bulk_action(editor=layout, section_ids=["one"], action="enable")
        assert result["count"] == 0
        assert not layout.history.can_undo

    def test_whole_batch_is_one_undo_step(self, layout):
        before = layout.store.sections
        bulk_action(editor=layout, section_ids=["one", "two", "three"], action="disable")

        assert undo(editor=layout) is True
        assert layout.store.sections == before
        assert not layout.history.can_undo


class TestBulkDelete:
    def test_requires_confirmation(self, layout):
        with pytest.raises(ValueError):
            bulk_action(editor=layout, section_ids=["one"], action="delete")
        assert len(layout.store) == 3

    def test_tolerates_absent_ids(self, layout):
        result = bulk_action(
            editor=layout,
            section_ids=["one", "ghost", "three"],
            action="delete",
            confirmed=True,
        )

        assert ids(layout.store) == ["two"]
        assert result["affected"] == ["one", "three"]

    def test_does_not_renumber_survivors(self, layout):
        bulk_action(editor=layout, section_ids=["one"], action="delete", confirmed=True)
        assert [s["order"] for s in layout.store.sections] == [1, 2]

    def test_rejects_unknown_action(self, layout):
        with pytest.raises(ValueError):
            bulk_action(editor=layout, section_ids=["one"], action="publish")


class TestSingleSectionUseCases:
    def test_add_by_type_uses_registry_defaults(self, layout):
        section = add_section(editor=layout, section_type="hero")

        assert section["order"] == 3
        assert section["title"] == "New Hero"
        assert section["settings"] == describe("hero")["default_settings"]
        assert section["id"].startswith("hero-")
        assert layout.history.can_undo

    def test_add_requires_a_type(self, layout):
        with pytest.raises(ValueError):
            add_section(editor=layout)
        with pytest.raises(ValueError):
            add_section(editor=layout, section={"title": "untyped"})

    def test_add_full_section_keeps_unknown_type(self, layout):
        section = add_section(editor=layout, section={"type": "hologram", "extra": 1})
        stored = layout.store.get(section["id"])
        assert stored["type"] == "hologram"
        assert stored["extra"] == 1

    def test_add_full_section_with_taken_id_is_rejected(self, layout):
        with pytest.raises(InvariantViolation):
            add_section(editor=layout, section={"id": "one", "type": "text"})
        assert len(layout.store) == 3
        assert not layout.history.can_undo

    def test_update_never_changes_id(self, layout):
        assert update_section(editor=layout, section_id="one", data={"id": "x", "title": "T"})
        assert layout.store.get("one")["title"] == "T"
        assert "x" not in layout.store

    def test_update_absent_id_records_nothing(self, layout):
        assert update_section(editor=layout, section_id="ghost", data={"title": "T"}) is False
        assert not layout.history.can_undo

    def test_identical_update_keeps_history(self, layout):
        delete_section(editor=layout, section_id="three")
        undo(editor=layout)
        assert layout.history.can_redo
        assert not layout.history.can_undo

        assert update_section(editor=layout, section_id="one", data={"title": "One", "enabled": True})

        assert layout.history.can_redo
        assert not layout.history.can_undo

    def test_type_change_resets_settings(self, layout):
        update_section(editor=layout, section_id="one", data={"type": "newsletter"})
        assert layout.store.get("one")["settings"] == describe("newsletter")["default_settings"]

    def test_type_change_with_settings_keeps_given_settings(self, layout):
        update_section(
            editor=layout,
            section_id="one",
            data={"type": "banner", "settings": {"textColor": "#000"}},
        )
        assert layout.store.get("one")["settings"] == {"textColor": "#000"}

    def test_delete_and_undo(self, layout):
        before = layout.store.sections
        assert delete_section(editor=layout, section_id="two") is True
        assert delete_section(editor=layout, section_id="two") is False

        undo(editor=layout)
        assert layout.store.sections == before

    def test_duplicate_single(self, layout):
        copy = duplicate_section(editor=layout, section_id="two")
        assert copy["order"] == 3
        assert copy["title"] == "Two (Copy)"
        assert duplicate_section(editor=layout, section_id="ghost") is None

    def test_move_up_and_down(self, layout):
        assert move_section(editor=layout, section_id="three", direction="up") is True
        assert ids(layout.store) == ["one", "three", "two"]
        assert [s["order"] for s in layout.store.sections] == [0, 1, 2]

        assert move_section(editor=layout, section_id="one", direction="up") is False
        assert move_section(editor=layout, section_id="two", direction="down") is False

        with pytest.raises(ValueError):
            move_section(editor=layout, section_id="one", direction="left")

    def test_reorder_keeps_unlisted_sections(self, layout):
        sections = reorder_sections(editor=layout, section_ids=["three", "ghost", "one"])
        assert [s["id"] for s in sections] == ["three", "one", "two"]
        assert [s["order"] for s in sections] == [0, 1, 2]

    def test_undo_redo_use_cases_log_activity(self, layout):
        delete_section(editor=layout, section_id="one")
        assert undo(editor=layout) is True
        assert redo(editor=layout) is True
        assert undo(editor=layout) is True
        assert undo(editor=layout) is False

        actions = [e.action for e in layout.activity.recent()]
        assert actions[:3] == ["undo", "redo", "undo"]


class TestTemplates:
    def test_apply_replaces_layout_verbatim(self, layout):
        sections = apply_layout_template(editor=layout, template_id="modern-ecommerce")

        assert [s["id"] for s in sections] == ["hero-1", "banner-1", "featured-1", "categories-1"]
        assert [s["order"] for s in sections] == [0, 1, 2, 3]

    def test_apply_is_undoable(self, layout):
        before = layout.store.sections
        apply_layout_template(editor=layout, template_id="minimal-store")
        undo(editor=layout)
        assert layout.store.sections == before

    def test_append_component_template(self, layout):
        section = append_component_template(editor=layout, template_id="newsletter-signup")

        assert section["type"] == "newsletter"
        assert section["order"] == 3
        assert section["enabled"] is True
        assert section["title"] == "Stay Updated"
        assert len(layout.store) == 4

    def test_unknown_template(self, layout):
        with pytest.raises(UnknownTemplateError):
            apply_layout_template(editor=layout, template_id="nope")
        with pytest.raises(UnknownTemplateError):
            append_component_template(editor=layout, template_id="nope")
        assert not layout.history.can_undo


class TestQueries:
    def test_search_by_title_or_type(self, three_sections):
        sections = three_sections.sections
        assert [s["id"] for s in search_sections(sections, term="FEAT")] == ["two"]
        assert [s["id"] for s in search_sections(sections, term="thr")] == ["three"]

    def test_filters(self, three_sections):
        three_sections.update("two", {"enabled": False})
        sections = three_sections.sections

        assert len(search_sections(sections, filter_by="all")) == 3
        assert [s["id"] for s in search_sections(sections, filter_by="disabled")] == ["two"]
        assert [s["id"] for s in search_sections(sections, filter_by="hero")] == ["one"]

    def test_summary(self, three_sections):
        three_sections.update("three", {"enabled": False})
        summary = summarize_layout(three_sections.sections)

        assert summary["total"] == 3
        assert summary["enabled"] == 2
        assert summary["disabled"] == 1
        assert summary["types"] == 3
