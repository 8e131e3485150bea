"""
Загрузчик полей категорий CLDR.

ЦКП: Словарь полей категории для локали, урезанный до whitelist.

Результат всегда содержит ровно ключи whitelist категории.
Отсутствующее в сырых данных поле присутствует со значением None.
"""

import re
from typing import Any, Dict, Optional
from loguru import logger

from ..domain.categories import Category
from ..domain.exceptions import MissingCategoryDataError
from ..domain.interfaces import IFieldLoader
from ..infrastructure.cldr_source import CLDRDataSource


RELATIVE_TYPE_RE = re.compile(r"^relative-type-(-?\d+)$")
RELATIVE_TIME_TYPE_RE = re.compile(r"^relativeTime-type-(future|past)$")
RELATIVE_TIME_PATTERN_RE = re.compile(r"^relativeTimePattern-count-(\w+)$")
PLURAL_RULE_PREFIX = "pluralRule-count-"


def transform_relative_field(data: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Преобразует поле dateFields.json в компактный формат.
    
    {"displayName": "day", "relative-type-0": "today",
     "relativeTime-type-future": {"relativeTimePattern-count-one": "in {0} day"}}
    ->
    {"displayName": "day", "relative": {"0": "today"},
     "relativeTime": {"future": {"one": "in {0} day"}}}
    """
    if data is None:
        return None
    
    relative = {}
    relative_time = {}
    
    for key, value in data.items():
        match = RELATIVE_TYPE_RE.match(key)
        if match:
            relative[match.group(1)] = value
            continue
        
        match = RELATIVE_TIME_TYPE_RE.match(key)
        if match:
            patterns = {}
            for pattern_key, pattern in value.items():
                pattern_match = RELATIVE_TIME_PATTERN_RE.match(pattern_key)
                if pattern_match:
                    patterns[pattern_match.group(1)] = pattern
            relative_time[match.group(1)] = patterns
    
    return {
        "displayName": data.get("displayName"),
        "relative": relative,
        "relativeTime": relative_time,
    }


def transform_plural_rules(data: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
    """Убирает префикс pluralRule-count- из ключей правил."""
    if data is None:
        return None
    
    rules = {}
    for key, rule in data.items():
        if key.startswith(PLURAL_RULE_PREFIX):
            rules[key[len(PLURAL_RULE_PREFIX):]] = rule
    return rules


# Преобразование значения поля для каждой категории
FIELD_TRANSFORMS = {
    Category.NUMBERS: lambda value: value,
    Category.PLURAL_RULES: transform_plural_rules,
    Category.RELATIVE_FIELDS: transform_relative_field,
}


class CLDRFieldLoader(IFieldLoader):
    """Загружает поля категории из CLDR и урезает их до whitelist."""
    
    def __init__(self, source: CLDRDataSource):
        """
        Args:
            source: Источник сырых данных CLDR
        """
        self.source = source
    
    def load(self, locale: str, category: Category) -> Dict[str, Any]:
        """
        Загружает поля категории для локали.
        
        Args:
            locale: Канонический тег локали
            category: Категория данных
            
        Returns:
            Dict: Ровно ключи whitelist категории
            
        Raises:
            MissingCategoryDataError: Если у локали нет данных категории
        """
        if not self.source.has_data(locale, category):
            raise MissingCategoryDataError(locale, category.value)
        
        raw = self.source.load_raw(locale, category)
        transform = FIELD_TRANSFORMS[category]
        
        fields = {}
        for name in category.field_names:
            fields[name] = transform(raw.get(name))
        
        logger.debug(
            f"[FieldLoader] Загружены поля {category.value} для {locale}: "
            f"{sum(1 for value in fields.values() if value is not None)}/{len(fields)}"
        )
        return fields
