import copy


def snapshot_sections(sections):
    """Immutable copy of a section list for the undo/redo stacks."""
    return tuple(copy.deepcopy(list(sections)))


def restore_sections(snapshot):
    return copy.deepcopy(list(snapshot))
