"""Tests for the undo/redo command history."""

from __future__ import annotations

from storefront.layout.history import CommandHistory


class TestUndoRedo:
    def test_inverse_law(self, three_sections):
        history = CommandHistory(three_sections)
        pre = three_sections.sections

        history.record()
        three_sections.update("two", {"title": "Renamed", "enabled": False})
        post = three_sections.sections

        assert history.undo() is True
        assert three_sections.sections == pre

        assert history.redo() is True
        assert three_sections.sections == post

    def test_new_mutation_after_undo_clears_redo(self, three_sections):
        history = CommandHistory(three_sections)

        history.record()
        three_sections.remove("one")
        history.undo()
        assert history.can_redo

        history.record()
        three_sections.remove("three")
        assert not history.can_redo
        assert history.redo() is False
        assert [s["id"] for s in three_sections.sections] == ["one", "two"]

    def test_empty_stacks_are_noops(self, three_sections):
        history = CommandHistory(three_sections)
        before = three_sections.sections

        assert history.undo() is False
        assert history.redo() is False
        assert three_sections.sections == before

    def test_depth_bounds_undo_stack(self, store, make_section):
        history = CommandHistory(store, depth=3)

        for index in range(5):
            history.record()
            store.add(make_section(f"s{index}", order=index))

        undone = 0
        while history.undo():
            undone += 1

        assert undone == 3
        # the two oldest snapshots were dropped
        assert [s["id"] for s in store.sections] == ["s0", "s1"]

    def test_snapshots_are_isolated_from_later_mutations(self, three_sections):
        history = CommandHistory(three_sections)
        history.record()
        three_sections.update("one", {"settings": {"title": "new"}})

        history.undo()
        assert three_sections.get("one")["settings"] == {"title": "one heading"}

    def test_multiple_undo_then_redo_walks_linearly(self, store, make_section):
        history = CommandHistory(store)
        states = [store.sections]

        for index in range(3):
            history.record()
            store.add(make_section(f"s{index}", order=index))
            states.append(store.sections)

        history.undo()
        history.undo()
        assert store.sections == states[1]

        history.redo()
        assert store.sections == states[2]
        history.redo()
        assert store.sections == states[3]
        assert history.redo() is False

    def test_clear(self, three_sections):
        history = CommandHistory(three_sections)
        history.record()
        history.clear()
        assert not history.can_undo
        assert not history.can_redo
