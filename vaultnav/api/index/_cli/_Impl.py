"""Index backend that shells out to the sqlite3 command line tool."""

import logging
import shutil
import subprocess
from pathlib import Path

from ..escape_for_index_query import escape_for_index_query
from ..IndexConfig import IndexConfig
from .._AbstractImpl import _AbstractImpl

logger = logging.getLogger(__name__)


class _Impl(_AbstractImpl):
    """Interpolates values as escaped string literals: ``sqlite3 <index> "<sql>"``."""

    def __init__(self, index_config: IndexConfig, index_path: str):
        self.binary = index_config.binary
        self.index_path = index_path

    def is_available(self) -> bool:
        return Path(self.index_path).is_file() and shutil.which(self.binary) is not None

    def select(self, sql_template: str, value: str | None = None) -> str:
        sql = sql_template if value is None else sql_template.format(f"'{escape_for_index_query(value)}'")
        return self.run(sql)

    def run(self, sql: str) -> str:
        """Run a complete SQL string and return stdout, or "" on any failure."""
        # sqlite3 would silently create a missing database file
        if not Path(self.index_path).is_file():
            logger.warning(f"Index file not found: {self.index_path}")
            return ""
        logger.debug(f"Running index query: {sql}")
        try:
            completed = subprocess.run(
                [self.binary, self.index_path, sql],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.warning(f"Could not run {self.binary}: {exc}")
            return ""
        if completed.returncode != 0:
            logger.warning(f"Index query failed ({completed.returncode}): {completed.stderr.strip()}")
            return ""
        return completed.stdout
