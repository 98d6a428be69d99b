"""Background audio playback with a single tracked process."""

import logging
import os
import signal
import subprocess
from contextlib import suppress
from pathlib import Path

logger = logging.getLogger(__name__)


class AudioPlayer:
    """Owns at most one running player process.

    ``start`` always stops the current process first, and ``stop`` is a
    no-op when nothing is playing. When a process exits, ``handle_exit``
    clears the slot, but only if that process is still the tracked one.

    With a ``pid_file`` the slot outlives this object: ``start`` records the
    player's PID there, and a later ``stop`` (from another run) sends SIGTERM
    to the recorded player before anything new starts.
    """

    def __init__(self, command: list[str], cwd: str, pid_file: Path | None = None):
        self.command = list(command)
        self.cwd = cwd
        self.pid_file = pid_file
        self._process: subprocess.Popen | None = None

    @property
    def process(self) -> subprocess.Popen | None:
        return self._process

    @property
    def is_playing(self) -> bool:
        return self._process is not None

    def start(self, path: str) -> bool:
        """Start playing ``path`` in the background from the vault root."""
        self.stop()
        logger.debug(f"Playing audio: {path}")
        try:
            process = subprocess.Popen(
                [*self.command, path],
                cwd=self.cwd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            logger.warning(f"Could not start {self.command[0]}: {exc}")
            return False
        self._process = process
        self._write_pid(process.pid)
        return True

    def stop(self) -> None:
        process = self._process
        if process is None:
            self._stop_recorded()
            return
        logger.debug("Stopping audio")
        self._process = None
        self._clear_pid()
        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()

    def handle_exit(self, process: subprocess.Popen) -> None:
        """Exit notification for ``process``."""
        if process is self._process:
            logger.debug(f"Player exited with {process.returncode}")
            self._process = None
            self._clear_pid()

    def poll(self) -> bool:
        """Deliver the exit notification if the tracked process has ended; return ``is_playing``."""
        process = self._process
        if process is not None and process.poll() is not None:
            self.handle_exit(process)
        return self.is_playing

    def wait(self) -> None:
        """Block until the tracked process exits."""
        process = self._process
        if process is None:
            return
        process.wait()
        self.handle_exit(process)

    def _stop_recorded(self) -> None:
        """Terminate a player started by an earlier run, if one is recorded."""
        if self.pid_file is None or not self.pid_file.exists():
            return
        pid = None
        with suppress(ValueError, OSError):
            pid = int(self.pid_file.read_text().strip())
        if pid:
            logger.debug(f"Stopping audio from an earlier run (pid {pid})")
            try:
                os.kill(pid, signal.SIGTERM)
            except ProcessLookupError:
                pass
            except OSError as exc:
                logger.warning(f"Could not stop player {pid}: {exc}")
        self._clear_pid()

    def _write_pid(self, pid: int) -> None:
        if self.pid_file is None:
            return
        try:
            self.pid_file.parent.mkdir(parents=True, exist_ok=True)
            self.pid_file.write_text(str(pid), encoding="utf-8")
        except OSError as exc:
            logger.warning(f"Could not record player pid in {self.pid_file}: {exc}")

    def _clear_pid(self) -> None:
        if self.pid_file is not None:
            with suppress(OSError):
                self.pid_file.unlink(missing_ok=True)
