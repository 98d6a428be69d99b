"""External image viewer."""

import logging
import subprocess

logger = logging.getLogger(__name__)


class ImageViewer:
    """Show an image with a terminal viewer (``timg`` by default), blocking until it exits."""

    def __init__(self, command: list[str]):
        self.command = list(command)

    def show(self, path: str) -> bool:
        """Run the viewer on ``path``; False if it could not run or failed."""
        logger.debug(f"Opening image: {path}")
        try:
            completed = subprocess.run([*self.command, path], check=False)
        except OSError as exc:
            logger.warning(f"Could not run {self.command[0]}: {exc}")
            return False
        if completed.returncode != 0:
            logger.warning(f"Image viewer exited with {completed.returncode} for {path}")
            return False
        return True
