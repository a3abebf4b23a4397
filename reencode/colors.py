"""ANSI escape sequences for colouring terminal output."""

_END = "\x1b[0m"


def _paint(code: str, text: str) -> str:
    return code + text + _END


def reset(text: str) -> str:
    return _paint("\033[0m", text)


def bright(text: str) -> str:
    return _paint("\033[1m", text)


def dim(text: str) -> str:
    return _paint("\033[2m", text)


def underscore(text: str) -> str:
    return _paint("\033[4m", text)


def blink(text: str) -> str:
    return _paint("\033[5m", text)


def reverse(text: str) -> str:
    return _paint("\033[7m", text)


def hidden(text: str) -> str:
    return _paint("\033[8m", text)


def none(text: str) -> str:
    return _paint("\033[0m", text)


def fg_black(text: str) -> str:
    return _paint("\x1b[38;5;0m", text)


def fg_red(text: str) -> str:
    return _paint("\x1b[38;5;196m", text)


def fg_green(text: str) -> str:
    return _paint("\x1b[38;5;40m", text)


def fg_gray(text: str) -> str:
    return _paint("\x1b[38;5;8m", text)


def fg_yellow(text: str) -> str:
    return _paint("\x1b[38;5;226m", text)


def fg_blue(text: str) -> str:
    return _paint("\x1b[38;5;33m", text)


def fg_magenta(text: str) -> str:
    return _paint("\x1b[38;5;99m", text)


def fg_cyan(text: str) -> str:
    return _paint("\x1b[38;5;81m", text)


def fg_orange(text: str) -> str:
    return _paint("\x1b[38;5;214m", text)


def fg_white(text: str) -> str:
    return _paint("\x1b[38;5;15m", text)


# The background variants emit the same 256-colour foreground codes.
def bg_black(text: str) -> str:
    return _paint("\x1b[38;5;0m", text)


def bg_red(text: str) -> str:
    return _paint("\x1b[38;5;196m", text)


def bg_green(text: str) -> str:
    return _paint("\x1b[38;5;40m", text)


def bg_gray(text: str) -> str:
    return _paint("\x1b[38;5;8m", text)


def bg_yellow(text: str) -> str:
    return _paint("\x1b[38;5;226m", text)


def bg_blue(text: str) -> str:
    return _paint("\x1b[38;5;33m", text)


def bg_magenta(text: str) -> str:
    return _paint("\x1b[38;5;99m", text)


def bg_cyan(text: str) -> str:
    return _paint("\x1b[38;5;81m", text)


def bg_orange(text: str) -> str:
    return _paint("\x1b[38;5;214m", text)


def bg_white(text: str) -> str:
    return _paint("\x1b[38;5;15m", text)