from __future__ import annotations

from jsminify.constants import EOF_CHAR
from jsminify.converters.js_compressor import JavaScriptCompressor
from jsminify.converters.registry import ConverterRegistry
from jsminify.engine.compressor import compress, compress_stream, minify
from jsminify.errors import (
    CompressionError,
    ConverterError,
    UnterminatedComment,
    UnterminatedRegex,
    UnterminatedString,
)

__version__ = '1.0.0'


def converter_registry() -> ConverterRegistry:
    """Factory helper returning a registry with the built-in converters."""
    return ConverterRegistry.default()


__all__ = [
    'EOF_CHAR',
    'CompressionError',
    'ConverterError',
    'ConverterRegistry',
    'JavaScriptCompressor',
    'UnterminatedComment',
    'UnterminatedRegex',
    'UnterminatedString',
    'compress',
    'compress_stream',
    'converter_registry',
    'minify',
]
