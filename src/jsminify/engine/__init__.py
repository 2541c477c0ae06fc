"""Minification engine: character source, comment stripper, emission engine."""
from jsminify.engine.comments import CommentStripper
from jsminify.engine.compressor import compress, compress_stream, minify
from jsminify.engine.emission import EmissionEngine, LiteralKind, Lookahead, Step, decide, is_word_char
from jsminify.engine.source import CharacterSource, normalize_char

__all__ = [
    "CharacterSource",
    "CommentStripper",
    "EmissionEngine",
    "LiteralKind",
    "Lookahead",
    "Step",
    "compress",
    "compress_stream",
    "decide",
    "is_word_char",
    "minify",
    "normalize_char",
]
