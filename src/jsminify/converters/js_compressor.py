from __future__ import annotations

import logging
from typing import Optional

from jsminify.engine.compressor import minify
from jsminify.errors import CompressionError, ConverterError
from jsminify.logging.helpers import get_logger


class JavaScriptCompressor:
    """Converter client that minifies JavaScript source strings."""

    DEFAULT_NAME = 'js-compressor'

    def __init__(self, name: str = DEFAULT_NAME, *, logger: Optional[logging.Logger] = None) -> None:
        self.name = name
        self._log = logger or get_logger('converters.js')

    def transform(self, source: object) -> str:
        """Return the minified form of `source`.

        Raises:
            ConverterError: If `source` is not a string or cannot be minified.
        """
        if not isinstance(source, str):
            msg = f'cannot compress JavaScript in converter {self.name!r} because given object is not a string'
            self._log.warning(msg)
            raise ConverterError(msg)
        try:
            return minify(source, logger=self._log)
        except CompressionError as exc:
            msg = f'cannot compress JavaScript in converter {self.name!r}: {exc}'
            self._log.warning(msg)
            raise ConverterError(msg) from exc
