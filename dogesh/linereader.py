"""Buffered line reading from a stream, one line at a time."""

from __future__ import annotations

import codecs
import re
from collections.abc import Iterator
from typing import IO, Any

_TERMINATOR = re.compile("[\n\0]")


class LineReader:
    """Reads lines ended by a newline or a NUL character.

    The stream may yield ``str`` or ``bytes``; bytes are decoded as UTF-8.
    Lines are returned without their terminator. A final unterminated line
    is returned as well; ``None`` marks the end of input.
    """

    BUFF_SIZE = 1024

    def __init__(self, stream: IO[Any]) -> None:
        self._stream = stream
        self._pending = ""
        self._eof = False
        self._decoder = codecs.getincrementaldecoder("utf-8")("surrogateescape")

    def readline(self) -> str | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while True:
            match = _TERMINATOR.search(self._pending)
            if match:
                line = self._pending[: match.start()]
                self._pending = self._pending[match.end():]
                return line
            if self._eof:
                if self._pending:
                    line, self._pending = self._pending, ""
                    return line
                return None
            self._fill()

    def _fill(self) -> None:
        chunk = self._stream.read(self.BUFF_SIZE)
        if not chunk:
            self._eof = True
            if isinstance(chunk, bytes):
                self._pending += self._decoder.decode(b"", final=True)
            return
        if isinstance(chunk, bytes):
            self._pending += self._decoder.decode(chunk)
        else:
            self._pending += chunk

    def __iter__(self) -> Iterator[str]:
        return iter(self.readline, None)