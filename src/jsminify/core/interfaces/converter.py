from __future__ import annotations
"""Converter protocol definitions."""

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class ConverterProtocol(Protocol):
    """A named client that turns one value into another.

    Attributes:
        name: Registry name of the converter (e.g. 'js-compressor').

    Methods:
        transform: Convert `source`, raising ConverterError on bad input.
    """

    name: str

    def transform(self, source: object) -> object:
        ...


ConverterBuilder = Callable[[], ConverterProtocol]
