import logging
import pandas as pd
import yaml
from functools import cached_property
from keyword import iskeyword
from typing import Dict, Optional
from wordcase.connections import ConventionDataSource
from wordcase.words import extract_words

log = logging.getLogger(__name__)

def normalize_alias(alias: str) -> str:
    """
    Reduce a convention name to the form used for alias matching.

    Example:
        >>> normalize_alias(' Kebab-Case ')
        'kebabcase'
        >>> normalize_alias('SNAKE_CASE')
        'snakecase'
    """
    return ''.join(extract_words(alias)).lower()

class ConventionData(ConventionDataSource):
    def __init__(self):
        with self.yaml_path.open('r', encoding='utf-8') as f:
            data = pd.DataFrame(yaml.safe_load(f)['conventions'])
            log.debug("Loaded %d naming conventions from %s", len(data), self.yaml_path)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])

    @cached_property
    def name_to_separator(self) -> Dict[str, str]:
        return dict(zip(self.name, self.separator))

    @cached_property
    def name_to_label(self) -> Dict[str, str]:
        return dict(zip(self.name, self.label))

    @cached_property
    def alias_to_name(self) -> Dict[str, str]:
        """ Normalized aliases, labels and names mapped to convention names """
        records = {}
        for name, label, aliases in zip(self.name, self.label, self.aliases):
            for alias in [name, label, *aliases]:
                records[normalize_alias(alias)] = name
        return records

    def resolve(self, alias: str) -> Optional[str]:
        """ Convention name for any spelling of an alias, or None if unknown """
        return self.alias_to_name.get(normalize_alias(alias))
