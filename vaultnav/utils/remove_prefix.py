"""Remove a literal path prefix."""


def remove_prefix(full_path: str, prefix: str) -> str:
    """Remove every literal occurrence of ``prefix`` from ``full_path``.

    The prefix is matched as plain text, never as a pattern, so vault roots
    containing regex metacharacters (``.``, ``+``, ``(``) are handled.

    >>> remove_prefix("/home/me/vault/notes/a.md", "/home/me/vault/")
    'notes/a.md'
    """
    if not prefix:
        return full_path
    return full_path.replace(prefix, "")
