"""
Quote-aware argument tokenizer.

Splits a command line into arguments the way a simple shell would:
whitespace separates tokens, and a double-quoted run is a single token.
"""

import re

# Either a quoted run (closing quote required) or a run of non-whitespace
# that does not begin with a quote, followed by optional separator space.
TOKEN_PATTERN = re.compile(r'([^"\s]\S*|".+?")\s*')


def tokenize(text: str) -> list[str]:
    """
    Split text into argument tokens.

    Quotes delimit tokens and are never part of one. An unterminated quote
    is skipped and the text after it is tokenized as plain words; it never
    yields a token of its own, so a lone trailing quote produces no empty
    token (``say "`` gives ``['say']``).

    Args:
        text: A single line of text.

    Returns:
        Tokens in left-to-right order; empty for whitespace-only text.

    Example:
        >>> tokenize('foo "bar baz" qux')
        ['foo', 'bar baz', 'qux']
    """
    return [match.group(1).replace('"', "") for match in TOKEN_PATTERN.finditer(text)]
