from __future__ import annotations
"""Entry points wiring CharacterSource, CommentStripper and EmissionEngine.

Each call builds its own reader, stripper, engine and output buffer, so
concurrent calls on independent inputs share nothing. Output is buffered
until the engine finishes: a failing call writes nothing.
"""

import io
import logging
from typing import Optional, TextIO

from jsminify.engine.comments import CommentStripper
from jsminify.engine.emission import EmissionEngine
from jsminify.engine.source import CharacterSource
from jsminify.logging.helpers import get_logger, trace_io


def compress_stream(reader: TextIO, writer: TextIO, *, logger: Optional[logging.Logger] = None) -> None:
    """Minify everything readable from `reader` into `writer`.

    Raises:
        CompressionError: On an unterminated comment, string or regex.
    """
    log = logger or get_logger('engine')
    with io.StringIO() as buffer:
        source = CharacterSource(reader)
        EmissionEngine(CommentStripper(source), buffer).run()
        result = buffer.getvalue()
    trace_io(log, 'compressed source', chars_in=source.position, chars_out=len(result))
    writer.write(result)


def compress(source: str, *, logger: Optional[logging.Logger] = None) -> str:
    """Return the raw engine output for `source`.

    The result usually starts with the synthetic leading newline; use
    `jsminify.minify` for the trimmed form.
    """
    with io.StringIO(source) as reader, io.StringIO() as writer:
        compress_stream(reader, writer, logger=logger)
        return writer.getvalue()


def minify(source: str, *, logger: Optional[logging.Logger] = None) -> str:
    """Minify JavaScript-like `source` and trim surrounding whitespace.

    Raises:
        CompressionError: If `source` holds an unterminated comment, string
            literal or regular expression literal.
    """
    return compress(source, logger=logger).strip(' \n')
