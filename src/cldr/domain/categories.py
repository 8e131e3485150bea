"""
Категории данных CLDR.

Каждая категория извлекается независимо и затем сливается по локалям.
Порядок в CATEGORY_ORDER определяет порядок слияния (последний побеждает).
"""

from enum import Enum
from typing import List

from config.settings import NUMBER_FIELD_NAMES, PLURAL_RULE_TYPES, RELATIVE_FIELD_NAMES


class Category(str, Enum):
    """Категория данных локали."""
    NUMBERS = "numbers"
    PLURAL_RULES = "plural_rules"
    RELATIVE_FIELDS = "relative_fields"

    @property
    def output_key(self) -> str:
        """Ключ категории в итоговом объекте локали."""
        return _OUTPUT_KEYS[self]

    @property
    def field_names(self) -> List[str]:
        """Whitelist полей категории."""
        return list(_FIELD_NAMES[self])


_OUTPUT_KEYS = {
    Category.NUMBERS: "numbers",
    Category.PLURAL_RULES: "pluralRules",
    Category.RELATIVE_FIELDS: "fields",
}

_FIELD_NAMES = {
    Category.NUMBERS: NUMBER_FIELD_NAMES,
    Category.PLURAL_RULES: PLURAL_RULE_TYPES,
    Category.RELATIVE_FIELDS: RELATIVE_FIELD_NAMES,
}

# Числа всегда первыми: они включены всегда
CATEGORY_ORDER = [
    Category.NUMBERS,
    Category.PLURAL_RULES,
    Category.RELATIVE_FIELDS,
]
