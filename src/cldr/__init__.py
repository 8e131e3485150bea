"""
Домен CLDR: извлечение и сжатие данных локалей.

Архитектура:
- Locale Registry: нормализация тегов и иерархия локалей
- Field Loader: поля категории, урезанные до whitelist
- Deduplicating Extractor: минимальный набор записей по иерархии
- Aggregator: слияние категорий (numbers, pluralRules, fields)

Вход: contracts.ExtractionOptions
Выход: {locale: {category_key: fields}} / contracts.ExtractionReport
"""

from src.cldr.application import CLDRComponentFactory, CLDRDataExtractor, extract_data
from src.cldr.domain import Category, UnknownLocaleError, MissingCategoryDataError
from src.cldr.extraction import DeduplicatingExtractor, ExtractionCache, CategoryAggregator
from src.cldr.locales import CLDRLocaleRegistry

__all__ = [
    # API
    "extract_data",
    "CLDRDataExtractor",
    "CLDRComponentFactory",
    # Components
    "CLDRLocaleRegistry",
    "DeduplicatingExtractor",
    "ExtractionCache",
    "CategoryAggregator",
    # Domain
    "Category",
    "UnknownLocaleError",
    "MissingCategoryDataError",
]
