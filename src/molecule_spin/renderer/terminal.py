"""Small helper for controlling ANSI terminal output."""

from __future__ import annotations

import os
import shutil
import sys
import time
from typing import Protocol, TextIO, Tuple


class DisplaySink(Protocol):
    """Where finished frames go: anything that can clear, draw and wait."""

    def clear(self) -> None: ...

    def draw(self, frame: str) -> None: ...

    def sleep(self, seconds: float) -> None: ...


class TerminalController:
    """Context manager that prepares the terminal for the animation."""

    def __init__(self, *, clear: bool = True, stream: TextIO | None = None) -> None:
        self._clear = clear
        self._stream = stream if stream is not None else sys.stdout
        self._cursor_hidden = False

    def __enter__(self) -> "TerminalController":
        self._stream.write("\033[?25l")
        self._stream.flush()
        self._cursor_hidden = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._cursor_hidden:
            self._stream.write("\033[0m")
            self._stream.write("\033[?25h")
            self._stream.flush()
            self._cursor_hidden = False

    def clear(self) -> None:
        if not self._clear:
            return
        self._stream.write("\033[2J")
        self._stream.write("\033[H")
        self._stream.flush()

    def draw(self, frame: str) -> None:
        self._stream.write(frame)
        self._stream.flush()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)

    def get_size(self) -> os.terminal_size:
        return shutil.get_terminal_size(fallback=(80, 24))

    def size_tuple(self) -> Tuple[int, int]:
        size = self.get_size()
        return size.columns, size.lines
