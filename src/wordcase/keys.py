__docformat__ = 'google'

__all__ = [
    'convert_keys'
]

import logging
from typing import Any
from wordcase.cases import convert_case
from wordcase.entities import Convention

log = logging.getLogger(__name__)

def convert_keys(obj: Any, convention) -> Any:
    """
    Recursively convert the string keys of dicts to a naming convention.

    Dicts nested inside dicts, lists and tuples are converted as well. Values
    are never converted, and non-string keys are kept as they are. Anything
    that is not a dict, list or tuple is returned unmodified.

    Args:
        obj: A dict, list or tuple, typically a decoded JSON payload
        convention: A `Convention` member or one of its names

    Returns:
        A new structure with converted keys

    Raises:
        ValueError: If two keys of the same dict convert to the same string

    Example:
        >>> convert_keys({'user_id': 1, 'Home Address': {'zip-code': '04101'}}, 'camel')
        {'userId': 1, 'homeAddress': {'zipCode': '04101'}}
        >>> convert_keys([{'First Name': 'Ada'}], 'dot.case')
        [{'first.name': 'Ada'}]
    """
    convention = Convention.lookup(convention)

    if isinstance(obj, dict):
        converted = {}
        for key, value in obj.items():
            new_key = convert_case(key, convention) if isinstance(key, str) else key
            if new_key in converted:
                log.warning("Keys collide after conversion to %s: %r", convention.label, new_key)
                raise ValueError(f"convert_keys: duplicate keys after conversion: {new_key!r}")
            converted[new_key] = convert_keys(value, convention)
        return converted
    elif isinstance(obj, list):
        return [convert_keys(item, convention) for item in obj]
    elif isinstance(obj, tuple):
        return tuple(convert_keys(item, convention) for item in obj)
    else:
        return obj
