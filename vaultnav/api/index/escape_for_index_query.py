"""Quote escaping for interpolated index queries (UNO: single function)."""


def escape_for_index_query(value: str) -> str:
    """Double every single quote so ``value`` fits inside a '...' SQL literal.

    This is the only escaping applied by the ``cli`` index backend. It keeps
    a value from closing its literal early, and nothing more: ``%`` and ``_``
    still act as wildcards inside LIKE patterns, and the index file is trusted
    local data. Use the ``sqlite`` backend for bound parameters.

    >>> escape_for_index_query("Bob's note")
    "Bob''s note"
    """
    return value.replace("'", "''")
