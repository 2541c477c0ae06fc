from __future__ import annotations
"""Raw character reader with a single pushback slot.

Control characters other than newline are read as a space and carriage
returns as a newline, so downstream stages only ever see printable
characters, spaces, newlines and the end-of-input sentinel.
"""

from typing import Optional, TextIO

from jsminify.constants import CARRIAGE_RETURN, EOF_CHAR, NEWLINE, SPACE


def normalize_char(ch: str) -> str:
    """Map one raw character to its normalized form."""
    if ch == EOF_CHAR or ch == NEWLINE or ch >= SPACE:
        return ch
    if ch == CARRIAGE_RETURN:
        return NEWLINE
    return SPACE


class CharacterSource:
    """Sequential reader over a text stream.

    Attributes:
        position: Number of raw characters consumed from the stream.
    """

    def __init__(self, reader: TextIO) -> None:
        self._reader = reader
        self._pushback: Optional[str] = None
        self.position = 0

    def next(self) -> str:
        """Return the next normalized character, or EOF_CHAR at the end."""
        if self._pushback is not None:
            ch = self._pushback
            self._pushback = None
            return ch
        raw = self._reader.read(1)
        if raw:
            self.position += 1
        return normalize_char(raw)

    def peek(self) -> str:
        """Return the next character without consuming it."""
        if self._pushback is None:
            self._pushback = self.next()
        return self._pushback
