def compact_order(sections, order_field="order"):
    """
    Re-assigns sequential order values (0..N-1) following list position.
    Returns new section dicts; the input list is left untouched.
    """
    return [
        {**section, order_field: index}
        for index, section in enumerate(sections)
    ]
