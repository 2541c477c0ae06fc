from .converter import ConverterBuilder, ConverterProtocol

__all__ = [
    'ConverterBuilder',
    'ConverterProtocol',
]
