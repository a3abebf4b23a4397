"""Running an external command and feeding its output, line by line, to a parser."""

from __future__ import annotations

import subprocess
from enum import Enum
from typing import Any

from reencode.log import debug

_LINE_ENDS = (b"\n", b"\r")


class ProcessStatus(Enum):
    """State of a media process."""

    WAIT = "wait"
    DONE = "done"
    RUNNING = "running"
    ERROR = "error"


class MediaProcess:
    """Runs a shell command and hands each output line to :meth:`parse`.

    Standard error is merged into standard output. A line ends at either a
    newline or a carriage return, and the line given to :meth:`parse` keeps
    that character. Output after the last line ending is not parsed.
    """

    def __init__(self, settings: Any, media: Any) -> None:
        self.settings = settings
        self.media = media
        self.status = ProcessStatus.WAIT
        self._stop_requested = False

    def start(self, command: str) -> None:
        """Run ``command`` through the shell, parsing its output as it arrives."""
        debug("[MediaProcess] SENDING COMMAND:", command)
        self.status = ProcessStatus.RUNNING

        if self._stop_requested:
            debug("Stop request received before starting the loop")
            return

        try:
            proc = subprocess.Popen(
                command,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as exc:
            raise RuntimeError(f"could not start command: {exc}") from exc

        with proc:
            assert proc.stdout is not None
            line = bytearray()
            while not self._stop_requested:
                char = proc.stdout.read(1)
                if not char:
                    break
                line += char
                if char in _LINE_ENDS:
                    self.parse(line.decode(errors="replace"))
                    line.clear()
            if self._stop_requested:
                debug("Stop request received during the loop")
                proc.kill()

    def parse(self, data: str) -> None:
        """Handle one line of output; subclasses override this."""
        debug("WARNING, USING DEFAULT PARSER", data)

    def stop(self) -> None:
        """Ask the running command to stop at the next output character."""
        self._stop_requested = True

    def is_waiting(self) -> bool:
        return self.status is ProcessStatus.WAIT

    def is_running(self) -> bool:
        return self.status is ProcessStatus.RUNNING

    def is_error(self) -> bool:
        return self.status is ProcessStatus.ERROR

    def is_done(self) -> bool:
        return self.status is ProcessStatus.DONE