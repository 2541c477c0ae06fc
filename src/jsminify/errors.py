from __future__ import annotations

"""Error taxonomy for the minification engine.

Every error is fatal for the call that raised it: the engine never returns
partial output. `position` is the zero-based input offset at which the
problem was detected (end of input for unterminated constructs).
"""

from typing import Optional


class CompressionError(ValueError):
    """Base class for malformed-input failures."""

    reason = "source text is malformed"

    def __init__(self, message: Optional[str] = None, *, position: Optional[int] = None) -> None:
        self.position = position
        text = message or self.reason
        if position is not None:
            text = f"{text} (at offset {position})"
        super().__init__(text)


class UnterminatedComment(CompressionError):
    reason = "a block comment is not terminated"


class UnterminatedString(CompressionError):
    reason = "a string literal is not terminated"


class UnterminatedRegex(CompressionError):
    reason = "a regular expression literal is not terminated"


class ConverterError(ValueError):
    """Raised by converter clients and the converter registry."""
