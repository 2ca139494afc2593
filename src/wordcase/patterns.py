"""Regex patterns used to split text into words and reassemble them.

Every pattern in this module is Unicode-aware. Python's `\\w` matches any
character for which `str.isalnum()` is true, plus the underscore, so the
character class `[^\\W_]` is exactly "a Unicode letter or number". Accented
and non-Latin letters (e.g. 'é', 'ß', 'ж') are treated as word characters
and are never stripped as punctuation.
"""

__docformat__ = 'google'

import re

# Base character sets for patterns
WORD_CHARACTER: str = "[^\\W_]"
"""Uncompiled regex building block matching one Unicode letter or number."""

NON_WORD_CHARACTER: str = "[\\W_]"
"""Uncompiled regex building block matching anything that is not a Unicode letter or number.

Underscores are included: they are separators, not word characters."""

EXPLICIT_SEPARATORS: str = "[-_\\s]"
"""Uncompiled regex building block matching the characters that explicitly delimit words.

These are whitespace, hyphens and underscores. Other punctuation is dropped
without splitting when words are split on explicit separators."""


## Tokenization
WORD_PATTERN: re.Pattern = re.compile(f"{WORD_CHARACTER}+")
"""Compiled regex matching a maximal run of Unicode letters and numbers.

Used in `wordcase.words.extract_words` and `wordcase.words.has_words`, and so
indirectly in `wordcase.cases.to_kebab_case` and `wordcase.lookups.normalize_alias`."""

SEPARATOR_PATTERN: re.Pattern = re.compile(f"{EXPLICIT_SEPARATORS}+")
"""Compiled regex matching a run of whitespace, hyphens and underscores.

Used in `wordcase.words.split_words`."""

NON_WORD_CHARACTER_PATTERN: re.Pattern = re.compile(NON_WORD_CHARACTER)
"""Compiled regex matching a single character that is not a letter or number.

Used in `wordcase.words.split_words` to strip punctuation from inside a word,
so 'v2.0' becomes 'v20' rather than two words."""


## Assembly
# Separators
CAMEL_SEPARATOR: str = ""
"""camelCase words are joined directly; word boundaries are marked by case."""

DOT_SEPARATOR: str = "."
"""String placed between words in dot.case."""

KEBAB_SEPARATOR: str = "-"
"""String placed between words in kebab-case."""

SNAKE_SEPARATOR: str = "_"
"""String placed between words in snake_case."""

# Patterns
WHITESPACE_PATTERN: re.Pattern = re.compile("\\s+")
"""Compiled regex matching a run of whitespace.

Used in `wordcase.cases.to_snake_case`."""

NON_SNAKE_PATTERN: re.Pattern = re.compile("\\W+")
"""Compiled regex matching a run of non-word characters.

Unlike `NON_WORD_CHARACTER`, underscores survive. Hyphens do not, so
'mobile-number' becomes 'mobilenumber' in snake_case.

Used in `wordcase.cases.to_snake_case`."""

UNDERSCORE_RUN_PATTERN: re.Pattern = re.compile("_{2,}")
"""Compiled regex matching two or more consecutive underscores.

Used in `wordcase.cases.to_snake_case`."""
