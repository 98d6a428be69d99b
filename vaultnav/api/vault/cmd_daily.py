"""Vault daily API command.

CLI: vaultnav daily [--offset N] [--date YYYY-MM-DD]
"""

from collections.abc import Iterator
from datetime import date as date_type
from pathlib import Path

from ...constants import DATE_FORMAT
from ..StageResult import StageResult


def cmd_daily(offset: int = 0, date: str = "") -> StageResult:
    """Compute the daily note path for a date.

    Args:
        offset: Days to move from the date (-1 yesterday, 1 tomorrow)
        date: Base date (YYYY-MM-DD), today if empty
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NavConfig import NavConfig
        from .daily_note_path import daily_note_path
        from .shift_date import shift_date

        yield (0.2, "Loading configuration...")
        try:
            config = NavConfig.load()
            day = shift_date(date or date_type.today().strftime(DATE_FORMAT), offset)
        except ValueError as e:
            result_obj.output = {"errors": [str(e)], "warnings": [], "date": date, "path": "", "exists": False}
            result_obj.result = f"Daily note failed: {e}"
            result_obj.success = False
            return

        yield (0.7, "Computing daily note path...")
        path = daily_note_path(config.vault, day)
        exists = Path(path).exists()

        yield (1.0, "Complete")
        result_obj.output = {"errors": [], "warnings": [], "date": day, "path": path, "exists": exists}
        result_obj.result = f"Daily note for {day}: {path}" + ("" if exists else " (new)")
        result_obj.success = True

    return StageResult(
        announce="Locating daily note...",
        progress_callback=do_work,
    )
