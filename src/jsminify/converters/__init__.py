"""Converter clients and their registry."""
from jsminify.converters.js_compressor import JavaScriptCompressor
from jsminify.converters.registry import ConverterRegistry

__all__ = [
    "ConverterRegistry",
    "JavaScriptCompressor",
]
