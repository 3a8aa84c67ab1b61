"""Synchronised character access to the console keyboard and display."""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import IO, Union

Source = Union[str, Path, IO[str], None]

_ENCODING = "latin-1"


class _Device:
    """Holds a text stream, closing it on exit only if it opened it."""

    def __init__(self, stream: IO[str], owned: bool) -> None:
        self._stream = stream
        self._owned = owned
        self._lock = threading.Lock()

    def close(self) -> None:
        """Close the underlying file if this console opened it."""
        if self._owned:
            self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class ConsoleInput(_Device):
    """The keyboard: reads from a file, a stream, or standard input when None."""

    def __init__(self, source: Source = None) -> None:
        if source is None:
            super().__init__(sys.stdin, owned=False)
        elif isinstance(source, (str, Path)):
            super().__init__(open(source, encoding=_ENCODING, newline=""), owned=True)
        else:
            super().__init__(source, owned=False)

    def get_char(self) -> str:
        """Read one character, or return "" at the end of input."""
        with self._lock:
            return self._stream.read(1)

    def get_string(self, size: int) -> str:
        """Read up to ``size`` characters.

        The result is shorter than ``size`` only when the input ended first.
        """
        chars = []
        for _ in range(size):
            ch = self.get_char()
            if not ch:
                break
            chars.append(ch)
        return "".join(chars)


class ConsoleOutput(_Device):
    """The display: writes to a file, a stream, or standard output when None."""

    def __init__(self, target: Source = None) -> None:
        if target is None:
            super().__init__(sys.stdout, owned=False)
        elif isinstance(target, (str, Path)):
            super().__init__(open(target, "w", encoding=_ENCODING, newline=""), owned=True)
        else:
            super().__init__(target, owned=False)

    def put_char(self, ch: str) -> None:
        """Write a single character and flush it to the display."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        with self._lock:
            self._stream.write(ch)
            self._stream.flush()

    def put_string(self, text: str) -> int:
        """Write every character of ``text``; return how many were written."""
        for ch in text:
            self.put_char(ch)
        return len(text)