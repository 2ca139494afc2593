"""Small functional helpers shared across the package.
"""

__docformat__ = 'google'

__all__ = [
    'chain_operations',
    'cached_class_attr'
]

from functools import cache, reduce
from typing import Any, Callable, Iterable

def chain_operations(value: Any, operations: Iterable[Callable[[Any], Any]]) -> Any:
    """
    Pass a value through a sequence of single-argument functions, in order.

    Args:
        value: Initial value
        operations: Functions to apply; each receives the previous result

    Returns:
        The result of the last function, or `value` if `operations` is empty

    Example:
        >>> chain_operations('  Hello ', [str.strip, str.lower])
        'hello'
        >>> chain_operations('unchanged', [])
        'unchanged'
    """
    return reduce(lambda result, operation: operation(result), operations, value)

class cached_class_attr:
    """
    Decorator for a lazily computed, cached attribute of the class itself.

    The wrapped function receives the class and runs once per class.
    """
    def __init__(self, f):
        self.f = cache(f)
        self.__doc__ = f.__doc__

    def __get__(self, instance, owner = None):
        return self.f(owner or type(instance))
