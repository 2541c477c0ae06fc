"""Public protocol surface for jsminify.core."""
from jsminify.core.interfaces import ConverterBuilder, ConverterProtocol

__all__ = [
    "ConverterBuilder",
    "ConverterProtocol",
]
