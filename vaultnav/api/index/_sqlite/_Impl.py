"""Index backend using an in-process, read-only SQLite connection."""

import logging
import sqlite3
from pathlib import Path
from urllib.parse import quote

from ..IndexConfig import IndexConfig
from .._AbstractImpl import _AbstractImpl

logger = logging.getLogger(__name__)


class _Impl(_AbstractImpl):
    """Binds values as parameters instead of interpolating them."""

    def __init__(self, index_config: IndexConfig, index_path: str):  # noqa: ARG002
        self.index_path = index_path

    def is_available(self) -> bool:
        return Path(self.index_path).is_file()

    def select(self, sql_template: str, value: str | None = None) -> str:
        if not Path(self.index_path).is_file():
            logger.warning(f"Index file not found: {self.index_path}")
            return ""
        sql = sql_template if value is None else sql_template.format("?")
        params: tuple[str, ...] = () if value is None else (value,)
        logger.debug(f"Running index query: {sql} {params!r}")
        uri = f"file:{quote(self.index_path)}?mode=ro"
        try:
            conn = sqlite3.connect(uri, uri=True)
            try:
                rows = conn.execute(sql, params).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.warning(f"Index query failed: {exc}")
            return ""
        # Same shape as the sqlite3 tool's list output: one line per row
        return "".join(f"{'' if row[0] is None else row[0]}\n" for row in rows)
