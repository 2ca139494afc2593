"""Word tokenization for case conversion.

A word is a maximal run of Unicode letters and numbers. Everything else in
the input is a separator and is discarded. Two tokenizers are provided:

    1. `extract_words` collects every run of letters and numbers, so any
       punctuation splits words ('2.0-beta' gives '2', '0', 'beta').
    2. `split_words` splits only on whitespace, hyphens and underscores, and
       strips other punctuation from inside each piece ('2.0-beta' gives
       '20', 'beta').

Both tokenizers preserve the case and order of the input. Neither raises;
input without letters or numbers yields an empty list.

`has_words` is not used by the converters themselves; it is public API for
callers that want to skip input that would convert to an empty string.
"""

__docformat__ = 'google'

__all__ = [
    'extract_words',
    'split_words',
    'has_words'
]

from typing import List
from wordcase.patterns import (
    WORD_PATTERN,
    SEPARATOR_PATTERN,
    NON_WORD_CHARACTER_PATTERN
)

def extract_words(text: str) -> List[str]:
    """
    Collect every run of letters and numbers in a string.

    Args:
        text: Any string

    Returns:
        Words in the order they appear, with case preserved

    Example:
        >>> extract_words('version 2.0-beta')
        ['version', '2', '0', 'beta']
        >>> extract_words('  This-is_an Example!  ')
        ['This', 'is', 'an', 'Example']
        >>> extract_words('?!')
        []
    """
    return WORD_PATTERN.findall(text)

def split_words(text: str) -> List[str]:
    """
    Split a string on whitespace, hyphens and underscores.

    Any other punctuation is removed from inside each piece rather than
    treated as a boundary. Pieces left empty are dropped.

    Args:
        text: Any string

    Returns:
        Words in the order they appear, with case preserved

    Example:
        >>> split_words('version 2.0-beta')
        ['version', '20', 'beta']
        >>> split_words(' hello__world-test ')
        ['hello', 'world', 'test']
        >>> split_words('éxemple test')
        ['éxemple', 'test']
        >>> split_words('- _ !')
        []
    """
    pieces = SEPARATOR_PATTERN.split(text)
    stripped = [NON_WORD_CHARACTER_PATTERN.sub('', piece) for piece in pieces]
    return list(filter(None, stripped))

def has_words(text: str) -> bool:
    """
    Check if a string contains at least one letter or number.

    Example:
        >>> has_words('user_id')
        True
        >>> has_words(' -- ')
        False
    """
    return WORD_PATTERN.search(text) is not None
