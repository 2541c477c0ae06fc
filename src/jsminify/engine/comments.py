from __future__ import annotations
"""Comment stripper layered over CharacterSource.

A line comment ('// ...') is read as the newline (or end of input) that
terminates it, and a block comment ('/* ... */') as a single space. A '/'
that starts neither is returned unchanged; deciding between division and a
regular expression is left to the emission engine.
"""

from jsminify.constants import ASTERISK, EOF_CHAR, NEWLINE, SLASH, SPACE
from jsminify.engine.source import CharacterSource
from jsminify.errors import UnterminatedComment


class CommentStripper:
    def __init__(self, source: CharacterSource) -> None:
        self._source = source

    @property
    def source(self) -> CharacterSource:
        return self._source

    def next_significant(self) -> str:
        """Return the next character with comments removed."""
        ch = self._source.next()
        if ch != SLASH:
            return ch

        follower = self._source.peek()
        if follower == SLASH:
            return self._skip_line_comment()
        if follower == ASTERISK:
            self._source.next()
            return self._skip_block_comment()
        return ch

    def _skip_line_comment(self) -> str:
        while True:
            ch = self._source.next()
            if ch == NEWLINE or ch == EOF_CHAR:
                return ch

    def _skip_block_comment(self) -> str:
        while True:
            ch = self._source.next()
            if ch == ASTERISK:
                if self._source.peek() == SLASH:
                    self._source.next()
                    return SPACE
            elif ch == EOF_CHAR:
                raise UnterminatedComment(position=self._source.position)
