"""Console logging with an optional multi-line buffer."""

from __future__ import annotations

from reencode import colors

_state = {"debug": False}


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off."""
    _state["debug"] = bool(enabled)


def _compose(messages: tuple[str, ...]) -> str:
    return "".join(f"{message} " for message in messages)


def send(*args: str) -> None:
    """Print the messages, each followed by a space, on one line."""
    print(_compose(args))


def debug(*args: str) -> None:
    """Print the messages only when debug output is enabled."""
    if _state["debug"]:
        send(*args)


class LogBuffer:
    """Collects a fixed number of lines before they are printed together."""

    def __init__(self, max_lines: int) -> None:
        self._max = max_lines
        self._count = 0
        self._text = ""

    def add_line(self, line: str) -> None:
        """Append a line; raises OverflowError once the buffer is full."""
        debug("[LogBuffer] called addline, max:", str(self._max),
              "min:", str(self._count))
        if self.is_full():
            raise OverflowError("log buffer is full")
        self._text += line + "\n"
        self._count += 1

    def is_full(self) -> bool:
        """Return True when the buffer holds its maximum number of lines."""
        return self._count >= self._max

    def output(self) -> str:
        """Return the buffered lines, each ending in a newline."""
        return self._text


class Log:
    """A logger that can gather lines in a buffer and print them at once."""

    def __init__(self) -> None:
        self._buffer: LogBuffer | None = None

    def send_buffer(self, length: int, message: str) -> None:
        """Add ``message`` to a buffer of ``length`` lines, printing it when full."""
        if self._buffer is None:
            self._buffer = LogBuffer(length)
        debug(f"[Log] called sendbuffer, len {length}")
        self._buffer.add_line(str(message))
        if self._buffer.is_full():
            debug("[Log] buffer is full")
            send(self._buffer.output())
            self._buffer = None

    def send_plain(self, *args: str) -> None:
        """Print the messages without any decoration."""
        print(_compose(args))

    def flush_buffer(self) -> None:
        """Print whatever is buffered, in red, and empty the buffer."""
        debug("[Log] called flush buffer")
        if self._buffer is None:
            debug("[Log] buffer is empty")
        else:
            send(colors.fg_red(self._buffer.output()))
        self._buffer = None

    def has_buffer(self) -> bool:
        """Return True if lines are waiting in the buffer."""
        return self._buffer is not None