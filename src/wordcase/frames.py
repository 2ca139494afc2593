"""Apply naming conventions to pandas objects.

Useful for standardizing column labels of data read from spreadsheets or
CSV files, e.g. turning 'First Name' and 'USER_ID' into 'first_name' and
'user_id' before further processing.
"""

__docformat__ = 'google'

__all__ = [
    'convert_series',
    'convert_columns'
]

import logging
import pandas as pd
from wordcase.cases import convert_case
from wordcase.entities import Convention

log = logging.getLogger(__name__)

def convert_series(series: pd.Series, convention) -> pd.Series:
    """
    Convert every value of a Series to a naming convention.

    Missing values are passed through unchanged. Any other value is handed to
    the conversion function as is, so non-string values are rejected the same
    way they would be by `wordcase.cases.convert_case`.

    Args:
        series: Series of strings
        convention: A `Convention` member or one of its names

    Returns:
        New Series with converted values and the original index

    Example:
        >>> convert_series(pd.Series(['First Name', 'USER_ID']), 'camel').tolist()
        ['firstName', 'userId']
    """
    convention = Convention.lookup(convention)
    return series.map(lambda value: convert_case(value, convention), na_action='ignore')

def convert_columns(frame: pd.DataFrame, convention) -> pd.DataFrame:
    """
    Convert the column labels of a DataFrame to a naming convention.

    Labels that are not strings (e.g. integer positions) are left unchanged.

    Args:
        frame: Any DataFrame
        convention: A `Convention` member or one of its names

    Returns:
        Copy of the frame with converted column labels

    Raises:
        ValueError: If two labels convert to the same string

    Example:
        >>> frame = pd.DataFrame(columns=['First Name', 'USER_ID', 0])
        >>> convert_columns(frame, 'snake_case').columns.tolist()
        ['first_name', 'user_id', 0]
    """
    convention = Convention.lookup(convention)
    labels = pd.Index([
        convert_case(label, convention) if isinstance(label, str) else label
        for label in frame.columns
    ])

    collisions = labels[labels.duplicated()].unique().tolist()
    if collisions:
        log.warning("Column labels collide after conversion to %s: %s", convention.label, collisions)
        raise ValueError(f"convert_columns: duplicate column labels after conversion: {collisions}")

    converted = frame.copy()
    converted.columns = labels
    return converted
