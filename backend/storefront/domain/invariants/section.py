from .exceptions import InvariantViolation


def assert_unique_ids(sections):
    seen = set()
    duplicates = []
    for section in sections:
        section_id = section.get("id")
        if section_id in seen:
            duplicates.append(section_id)
        seen.add(section_id)

    if duplicates:
        raise InvariantViolation(f"Section ids are not unique: {duplicates}")


def assert_section_order(sections):
    orders = [section.get("order") for section in sections]
    expected = list(range(len(orders)))

    if orders != expected:
        raise InvariantViolation(
            f"Section orders do not match positions 0..{len(orders) - 1}: {orders}"
        )


def assert_layout(sections):
    """
    Checks the structural invariants of a layout.

    Store mutations do not call this; it backs tests. Caller-built
    sections are checked with assert_unique_ids before they are added.
    """
    assert_unique_ids(sections)
    assert_section_order(sections)
