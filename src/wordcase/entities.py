__docformat__ = 'google'

__all__ = [
    'Convention'
]

from enum import Enum
from typing import List
from wordcase.errors import InvalidArgumentError
from wordcase.helpers import cached_class_attr

class Convention(Enum):
    """
    Enumeration of the naming conventions that text can be converted to.

    Labels, separators and accepted aliases for each member are read from
    the convention table in `wordcase/data/conventions.yaml`. The table is
    loaded on first use, by name resolution only; `to_camel_case` and the
    other converters never read it.
    """
    CAMEL = "camel"
    DOT = "dot"
    KEBAB = "kebab"
    SNAKE = "snake"

    @cached_class_attr
    def _lookup(cls):
        """
        @private
        """
        from wordcase.lookups import ConventionData
        return ConventionData()

    @property
    def separator(self) -> str:
        """String placed between words, e.g. '-' for kebab-case."""
        return self._lookup.name_to_separator[self.value]

    @property
    def label(self) -> str:
        """The convention's own name written in the convention, e.g. 'dot.case'."""
        return self._lookup.name_to_label[self.value]

    @property
    def aliases(self) -> List[str]:
        return sorted(
            alias for alias, name in self._lookup.alias_to_name.items()
            if name == self.value
        )

    @classmethod
    def lookup(cls, convention) -> 'Convention':
        """
        Resolve a convention from a member or any of its names.

        Matching ignores case, whitespace and punctuation.

        Args:
            convention: A `Convention` member, or a name such as 'kebab-case' or 'snake'

        Returns:
            The matching `Convention` member

        Raises:
            InvalidArgumentError: If the name is not a string or is not a known convention

        Example:
            >>> Convention.lookup('kebab-case')
            <Convention.KEBAB: 'kebab'>
            >>> Convention.lookup('SNAKE_CASE')
            <Convention.SNAKE: 'snake'>
            >>> Convention.lookup(Convention.DOT)
            <Convention.DOT: 'dot'>
        """
        if isinstance(convention, cls):
            return convention
        if not isinstance(convention, str):
            raise InvalidArgumentError(
                f"Convention.lookup: expected string but received {type(convention).__name__}"
            )
        name = cls._lookup.resolve(convention)
        if name is None:
            raise InvalidArgumentError(f"Convention.lookup: unknown naming convention {convention!r}")
        return cls(name)
