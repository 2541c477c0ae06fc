from __future__ import annotations

"""Character classes driving the emission rules.

Kept in one place so the step function, the literal copier and the tests
agree on the exact sets.
"""

# End-of-input sentinel returned by every character reader.
EOF_CHAR: str = ''

SPACE: str = ' '
NEWLINE: str = '\n'
CARRIAGE_RETURN: str = '\r'
SLASH: str = '/'
ASTERISK: str = '*'
BACKSLASH: str = '\\'

QUOTES: frozenset[str] = frozenset(('"', "'"))

# A newline before one of these may start a statement continuation.
NEWLINE_KEEP_BEFORE: frozenset[str] = frozenset('{[(+-')

# A newline after one of these may end a statement.
NEWLINE_KEEP_AFTER: frozenset[str] = frozenset('}])+-"\'')

# A '/' following one of these opens a regular expression literal.
REGEX_PREFIX: frozenset[str] = frozenset('(,=:[!&|?{};\n')

# Ordinals above this value are treated as identifier characters.
WORD_ORDINAL_LIMIT: int = 126
