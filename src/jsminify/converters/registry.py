from __future__ import annotations
"""
ConverterRegistry

Named lookup for converter clients. A converter is registered either
eagerly (an instance) or lazily (a builder invoked on first access, after
which the instance replaces the builder). Names are case-insensitive.

Built-ins:
    - 'js-compressor': JavaScriptCompressor, registered lazily.
"""
from dataclasses import dataclass
import logging
from typing import Dict, List, Optional

from jsminify.core.interfaces.converter import ConverterBuilder, ConverterProtocol
from jsminify.errors import ConverterError
from jsminify.logging.helpers import get_logger


@dataclass(frozen=True)
class _ConverterRegItem:
    converter: ConverterProtocol
    priority: int = 0


def _key(name: str) -> str:
    key = (name or '').strip().lower()
    if not key:
        raise ConverterError('converter name must be non-empty')
    return key


class ConverterRegistry:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('converters.registry')
        self._by_name: Dict[str, _ConverterRegItem] = {}
        self._lazy_builders: Dict[str, tuple[ConverterBuilder, int]] = {}

    @classmethod
    def default(cls, *, logger: Optional[logging.Logger] = None) -> 'ConverterRegistry':
        """Build a registry with the built-in converters registered lazily."""
        from jsminify.converters.js_compressor import JavaScriptCompressor

        reg = cls(logger=logger)
        reg.register_lazy(JavaScriptCompressor.DEFAULT_NAME, builder=JavaScriptCompressor)
        return reg

    def register(self, name: str, converter: ConverterProtocol, *, priority: int = 0) -> None:
        """Register `converter` unless a higher-priority one holds `name`."""
        key = _key(name)
        prev = self._by_name.get(key)
        if prev is None or priority >= prev.priority:
            self._by_name[key] = _ConverterRegItem(converter=converter, priority=priority)
        self._lazy_builders.pop(key, None)

    def register_lazy(self, name: str, *, builder: ConverterBuilder, priority: int = 0) -> None:
        self._lazy_builders[_key(name)] = (builder, priority)

    def get(self, name: str) -> ConverterProtocol:
        key = _key(name)
        item = self._by_name.get(key)
        if item:
            return item.converter
        lazy = self._lazy_builders.get(key)
        if lazy:
            builder, prio = lazy
            converter = builder()
            self._log.debug('built converter %r', key)
            self.register(key, converter, priority=prio)
            return converter
        raise ConverterError(f'unknown converter {name!r}')

    def names(self) -> List[str]:
        return sorted(set(self._by_name) | set(self._lazy_builders))

    def transform(self, name: str, source: object) -> object:
        """Look up converter `name` and apply it to `source`."""
        return self.get(name).transform(source)
