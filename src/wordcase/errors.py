__docformat__ = 'google'

__all__ = [
    'InvalidArgumentError'
]

class InvalidArgumentError(TypeError, ValueError):
    """
    Raised when a conversion function receives input it cannot accept.

    Covers missing input (`None`), input that is not a string, blank input
    where a non-empty string is required, and unknown convention names.
    The message always starts with the name of the function that rejected
    the input.

    Subclasses both `TypeError` and `ValueError`, so existing handlers for
    either will catch it.
    """
