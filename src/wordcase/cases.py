"""Case conversion functions.

This module converts human-readable text such as 'first name', 'USER_ID' or
' hello__world-test ' into identifiers written in a naming convention:

    * camelCase: `to_camel_case`
    * dot.case: `to_dot_case`
    * kebab-case: `to_kebab_case`
    * snake_case: `to_snake_case`

Every function is pure: the input is never modified and no state is kept
between calls. Words are Unicode-aware, so accented letters are kept as part
of a word rather than stripped as punctuation.

`to_camel_case`, `to_dot_case` and `to_kebab_case` validate their input and
raise `wordcase.errors.InvalidArgumentError` for `None` or non-string values.
`to_kebab_case` also rejects blank input. `to_snake_case` is a legacy variant
that performs no validation and does not trim underscores from its output.
"""

__docformat__ = 'google'

__all__ = [
    'to_camel_case',
    'to_dot_case',
    'to_kebab_case',
    'to_snake_case',
    'convert_case'
]

from typing import List
from wordcase.entities import Convention
from wordcase.errors import InvalidArgumentError
from wordcase.helpers import chain_operations
from wordcase.words import extract_words, split_words
from wordcase.patterns import (
    CAMEL_SEPARATOR,
    DOT_SEPARATOR,
    KEBAB_SEPARATOR,
    SNAKE_SEPARATOR,
    WHITESPACE_PATTERN,
    NON_SNAKE_PATTERN,
    UNDERSCORE_RUN_PATTERN
)

def _validate(text: str, caller: str, allow_blank: bool = True) -> str:
    expected = 'a string' if allow_blank else 'a non-empty string'
    if text is None:
        raise InvalidArgumentError(f"{caller}: input is None; expected {expected}")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"{caller}: expected string but received {type(text).__name__}")

    trimmed = text.strip()
    if not allow_blank and trimmed == '':
        raise InvalidArgumentError(f"{caller}: expected a non-empty string")
    return trimmed

def _lower_words(text: str) -> List[str]:
    return [word.lower() for word in split_words(text)]

def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]

def to_camel_case(text: str) -> str:
    """
    Convert a string to camelCase.

    Whitespace, hyphens and underscores separate words; other punctuation is
    dropped. The first word is lowercase and every following word starts
    with an uppercase letter.

    Note:
        Not idempotent for multi-word output: 'helloWorld' is a single word,
        so converting it again gives 'helloworld'.

    Args:
        text: The string to convert

    Returns:
        The camelCase string, or '' if the input has no letters or numbers

    Raises:
        InvalidArgumentError: If `text` is None or not a string

    Example:
        >>> to_camel_case('hello world')
        'helloWorld'
        >>> to_camel_case(' hello__world-test ')
        'helloWorldTest'
        >>> to_camel_case('version 2.0-beta')
        'version20Beta'
        >>> to_camel_case('éxemple test')
        'éxempleTest'
    """
    words = _lower_words(_validate(text, 'to_camel_case'))
    if not words:
        return ''

    first, *rest = words
    return CAMEL_SEPARATOR.join([first, *map(_upper_first, rest)])

def to_dot_case(text: str) -> str:
    """
    Convert a string to dot.case (lowercase words separated by dots).

    Whitespace, hyphens and underscores separate words; other punctuation is
    dropped.

    Args:
        text: The string to convert

    Returns:
        The dot.case string, or '' if the input has no letters or numbers

    Raises:
        InvalidArgumentError: If `text` is None or not a string

    Example:
        >>> to_dot_case('SCREEN_NAME')
        'screen.name'
        >>> to_dot_case(' hello__world-test ')
        'hello.world.test'
        >>> to_dot_case('version 2.0-beta')
        'version.20.beta'
    """
    words = _lower_words(_validate(text, 'to_dot_case'))
    return DOT_SEPARATOR.join(words)

def to_kebab_case(text: str) -> str:
    """
    Convert a string to kebab-case (lowercase words separated by hyphens).

    Operations performed:
        1. Trim and lowercase
        2. Collect every run of letters and numbers
        3. Join the runs with hyphens

    Unlike `to_camel_case` and `to_dot_case`, all punctuation separates
    words here, so '2.0' becomes '2-0'.

    Args:
        text: The string to convert

    Returns:
        The kebab-case string

    Raises:
        InvalidArgumentError: If `text` is None, not a string, or blank

    Example:
        >>> to_kebab_case('USER_ID')
        'user-id'
        >>> to_kebab_case('version 2.0-beta')
        'version-2-0-beta'
        >>> to_kebab_case('  This-is_an Example!  ')
        'this-is-an-example'
    """
    trimmed = _validate(text, 'to_kebab_case', allow_blank=False)
    return KEBAB_SEPARATOR.join(extract_words(trimmed.lower()))

def to_snake_case(text: str) -> str:
    """
    Convert a string to snake_case.

    Operations performed:
        1. Lowercase
        2. Replace every run of whitespace with an underscore
        3. Strip all other non-word characters, including hyphens
        4. Collapse repeated underscores

    The input is not validated or trimmed, so leading and trailing
    whitespace becomes a leading or trailing underscore.

    Args:
        text: The string to convert

    Returns:
        The snake_case string

    Example:
        >>> to_snake_case('Hello World')
        'hello_world'
        >>> to_snake_case('user__id')
        'user_id'
        >>> to_snake_case('mobile-number')
        'mobilenumber'
        >>> to_snake_case(' first name ')
        '_first_name_'
    """
    snake_steps = [
        str.lower
        , lambda s: WHITESPACE_PATTERN.sub(SNAKE_SEPARATOR, s)
        , lambda s: NON_SNAKE_PATTERN.sub('', s)
        , lambda s: UNDERSCORE_RUN_PATTERN.sub(SNAKE_SEPARATOR, s)
    ]
    return chain_operations(text, snake_steps)

_CONVERTERS = {
    Convention.CAMEL: to_camel_case,
    Convention.DOT: to_dot_case,
    Convention.KEBAB: to_kebab_case,
    Convention.SNAKE: to_snake_case
}

def convert_case(text: str, convention) -> str:
    """
    Convert a string to any supported naming convention.

    Args:
        text: The string to convert
        convention: A `wordcase.entities.Convention` member or one of its names

    Returns:
        The converted string, with the same validation as the matching function

    Raises:
        InvalidArgumentError: If `convention` is unknown, or `text` is rejected

    Example:
        >>> convert_case('first name', 'camelCase')
        'firstName'
        >>> convert_case('first name', 'kebab')
        'first-name'
        >>> convert_case('first name', Convention.DOT)
        'first.name'
    """
    return _CONVERTERS[Convention.lookup(convention)](text)
