"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import cases
from . import words
from . import entities
from . import keys
from . import patterns
from .cases import *
from .entities import Convention
from .errors import InvalidArgumentError

__all__ = [
    # Modules
    'cases',
    'words',
    'entities',
    'keys',
    'patterns',
    # Functions
    'to_camel_case',
    'to_dot_case',
    'to_kebab_case',
    'to_snake_case',
    'convert_case',
    # Classes
    'Convention',
    'InvalidArgumentError'
]
