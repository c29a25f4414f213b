"""Terminal styling, status messages and progress indicators."""

from __future__ import annotations

import itertools
import os
import sys
import threading
from typing import TextIO

_RESET = "\x1b[0m"
_CLEAR_LINE = "\r\x1b[2K"
_SPINNER_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _style(text: object, code: str) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Render text in bold."""
    return _style(text, "1")


def red(text: object) -> str:
    """Render text in red."""
    return _style(text, "31")


def green(text: object) -> str:
    """Render text in green."""
    return _style(text, "32")


def blue(text: object) -> str:
    """Render text in blue."""
    return _style(text, "34")


def warn(message: str) -> None:
    """Print a warning line in red."""
    prefix = "!" if no_emoji() else "⚠️ "
    print(f"{red(prefix)} {red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    prefix = "✓" if no_emoji() else "✅"
    print(f"{green(prefix)} {green(message)}")


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Spinner:
    """A spinner with a message, animated only when writing to a terminal."""

    def __init__(
        self,
        message: str = "",
        *,
        stream: TextIO | None = None,
        interval: float = 0.1,
    ) -> None:
        self.message = message
        self._stream = stream if stream is not None else sys.stderr
        self._interval = interval
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._frames = itertools.cycle(_SPINNER_FRAMES)

    @property
    def running(self) -> bool:
        return self._thread is not None

    def _draw(self) -> None:
        with self._lock:
            self._stream.write(f"{_CLEAR_LINE}{next(self._frames)} {self.message}")
            self._stream.flush()

    def _spin(self) -> None:
        while not self._stop.wait(self._interval):
            self._draw()

    def start(self) -> None:
        """Start ticking in the background."""
        if self._thread is not None or not _is_terminal(self._stream):
            return
        self._stop.clear()
        self._draw()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def set_message(self, message: str) -> None:
        """Replace the message shown next to the spinner."""
        with self._lock:
            self.message = message

    def finish_and_clear(self) -> None:
        """Stop the spinner and erase its line."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        with self._lock:
            self._stream.write(_CLEAR_LINE)
            self._stream.flush()

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish_and_clear()


class ProgressBar:
    """A fixed-width bar of the form ``Progress: [###>---] pos/len``."""

    def __init__(
        self,
        total: int,
        position: int = 0,
        *,
        width: int = 60,
        stream: TextIO | None = None,
    ) -> None:
        self.total = total
        self.position = position
        self.width = width
        self._stream = stream if stream is not None else sys.stderr

    def inc(self, amount: int = 1) -> None:
        """Advance the bar and redraw it on a terminal."""
        self.position += amount
        if _is_terminal(self._stream):
            self._stream.write("\r" + self.render())
            self._stream.flush()

    def render(self) -> str:
        """Return the bar as a line of text."""
        fraction = 1.0 if self.total == 0 else min(self.position / self.total, 1.0)
        filled = int(fraction * self.width)
        head = 1 if 0.0 < fraction and filled < self.width else 0
        rest = self.width - filled - head
        done_part = "#" * filled + ">" * head
        pending_part = "-" * rest
        bar = (green(done_part) if done_part else "") + (
            red(pending_part) if pending_part else ""
        )
        return f"Progress: [{bar}] {self.position}/{self.total}"