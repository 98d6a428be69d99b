"""Filename search under a root directory."""

import logging
import subprocess

from ..index.trim_result_terminator import trim_result_terminator

logger = logging.getLogger(__name__)


class FileSearch:
    """Find files whose path contains a fixed search term.

    Lists files with ``rg --files <root>`` and keeps the lines containing
    the term (plain substring, case-sensitive), like
    ``rg --files <root> | rg -F <term>``.
    """

    def __init__(self, search_binary: str = "rg"):
        self.search_binary = search_binary

    def search(self, root: str, term: str) -> str:
        """Return matching paths, newline-delimited, without the final terminator.

        Any failure (missing binary, bad root) gives "".
        """
        if not root:
            logger.warning("File search skipped: no search root configured")
            return ""
        logger.debug(f"Searching {root} for {term!r}")
        try:
            completed = subprocess.run(
                [self.search_binary, "--files", root],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.warning(f"Could not run {self.search_binary}: {exc}")
            return ""
        if completed.returncode != 0:
            logger.warning(f"File search failed ({completed.returncode}): {completed.stderr.strip()}")
            return ""
        matches = [line for line in completed.stdout.splitlines() if term in line]
        return trim_result_terminator("".join(f"{line}\n" for line in matches))
