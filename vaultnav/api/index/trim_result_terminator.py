"""Result terminator trimming (UNO: single function)."""


def trim_result_terminator(text: str) -> str:
    """Remove one trailing line-break sequence (``\\r\\n``, ``\\n`` or ``\\r``)."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith(("\n", "\r")):
        return text[:-1]
    return text
