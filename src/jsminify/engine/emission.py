from __future__ import annotations
"""Two-character lookahead emission engine.

The engine keeps a pair of characters: A, the candidate for emission, and
B, the next significant character. Each iteration of the main loop asks the
pure `decide` function what to do with the pair:

    EMIT    write A, then advance (A <- B, pull a new B)
    SKIP    advance without writing A
    DROP_B  discard B and pull a new one, A is kept

Advancing onto a quote copies the string literal verbatim. Pulling a '/'
into B right after a character that can precede an expression copies the
regular expression literal verbatim. Both copies leave the closing
delimiter in A so the main loop emits it like any other character.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TextIO, Type

from jsminify.constants import (
    BACKSLASH,
    EOF_CHAR,
    NEWLINE,
    NEWLINE_KEEP_AFTER,
    NEWLINE_KEEP_BEFORE,
    QUOTES,
    REGEX_PREFIX,
    SLASH,
    SPACE,
    WORD_ORDINAL_LIMIT,
)
from jsminify.engine.comments import CommentStripper
from jsminify.errors import CompressionError, UnterminatedRegex, UnterminatedString


class Step(Enum):
    EMIT = 'emit'
    SKIP = 'skip'
    DROP_B = 'drop_b'


class LiteralKind(Enum):
    STRING = 'string'
    REGEX = 'regex'

    @property
    def error(self) -> Type[CompressionError]:
        return UnterminatedString if self is LiteralKind.STRING else UnterminatedRegex


def is_word_char(ch: str) -> bool:
    """True for characters that may continue an identifier or number.

    Letters, digits, '_', '$', '\\' and anything above ASCII '~' qualify.
    The sentinel EOF_CHAR never does.
    """
    if not ch:
        return False
    return (
        ('a' <= ch <= 'z')
        or ('0' <= ch <= '9')
        or ('A' <= ch <= 'Z')
        or ch in ('_', '$', BACKSLASH)
        or ord(ch) > WORD_ORDINAL_LIMIT
    )


def decide(a: str, b: str) -> Step:
    """Return the step to take for the lookahead pair (a, b)."""
    if a == SPACE:
        return Step.EMIT if is_word_char(b) else Step.SKIP

    if a == NEWLINE:
        if b in NEWLINE_KEEP_BEFORE:
            return Step.EMIT
        if b == SPACE:
            return Step.DROP_B
        return Step.EMIT if is_word_char(b) else Step.SKIP

    if b == SPACE:
        return Step.EMIT if is_word_char(a) else Step.DROP_B
    if b == NEWLINE:
        if a in NEWLINE_KEEP_AFTER or is_word_char(a):
            return Step.EMIT
        return Step.DROP_B
    return Step.EMIT


@dataclass
class Lookahead:
    a: str = NEWLINE
    b: str = EOF_CHAR


class EmissionEngine:
    """Drive a CommentStripper to completion, writing minified text to `out`.

    An engine instance serves a single run; build a new one per input.
    """

    def __init__(self, stripper: CommentStripper, out: TextIO) -> None:
        self._stripper = stripper
        self._source = stripper.source
        self._out = out
        self._pair = Lookahead()

    def run(self) -> None:
        pair = self._pair
        self._pull_b()
        while pair.a != EOF_CHAR:
            step = decide(pair.a, pair.b)
            if step is Step.EMIT:
                self._out.write(pair.a)
                self._advance()
            elif step is Step.SKIP:
                self._advance()
            else:
                self._pull_b()

    def _advance(self) -> None:
        pair = self._pair
        pair.a = pair.b
        if pair.a in QUOTES:
            self._out.write(pair.a)
            self._copy_literal(LiteralKind.STRING, pair.a)
        self._pull_b()

    def _pull_b(self) -> None:
        pair = self._pair
        pair.b = self._stripper.next_significant()
        if pair.b == SLASH and pair.a in REGEX_PREFIX:
            self._out.write(pair.a)
            self._out.write(pair.b)
            self._copy_literal(LiteralKind.REGEX, SLASH)
            pair.b = self._stripper.next_significant()

    def _copy_literal(self, kind: LiteralKind, terminator: str) -> None:
        """Copy raw characters up to the unescaped `terminator`.

        The opening delimiter has already been written. On return A holds
        the terminator, which has not been written yet.
        """
        source = self._source
        while True:
            ch = source.next()
            if ch == terminator:
                self._pair.a = ch
                return
            if ch == NEWLINE or ch == EOF_CHAR:
                raise kind.error(position=source.position)
            if ch == BACKSLASH:
                self._out.write(ch)
                ch = source.next()
                if ch == EOF_CHAR:
                    raise kind.error(position=source.position)
            self._out.write(ch)
