"""
Извлечение и дедупликация данных CLDR.

Содержит:
- CLDRFieldLoader: Загрузка полей категории с урезанием до whitelist
- DeduplicatingExtractor: Дедупликация по иерархии локалей
- CategoryAggregator: Слияние категорий по локалям
"""

from .fingerprint import fingerprint
from .field_loader import CLDRFieldLoader, transform_relative_field, transform_plural_rules
from .dedup_extractor import DeduplicatingExtractor, ExtractionCache, ExtractionRun
from .aggregator import CategoryAggregator, AggregationResult, MergeCollision, merge_data

__all__ = [
    "fingerprint",
    "CLDRFieldLoader",
    "transform_relative_field",
    "transform_plural_rules",
    "DeduplicatingExtractor",
    "ExtractionCache",
    "ExtractionRun",
    "CategoryAggregator",
    "AggregationResult",
    "MergeCollision",
    "merge_data",
]
