"""Daily note date arithmetic."""

from datetime import datetime, timedelta

from ...constants import DATE_FORMAT


def shift_date(date: str, days: int) -> str:
    """Return ``date`` (YYYY-MM-DD) moved by ``days`` calendar days.

    >>> shift_date("2024-03-01", -1)
    '2024-02-29'

    Raises:
        ValueError: If ``date`` is not a YYYY-MM-DD date
    """
    parsed = datetime.strptime(date, DATE_FORMAT)
    return (parsed + timedelta(days=days)).strftime(DATE_FORMAT)
