"""
Агрегатор категорий CLDR.

Запускает дедуплицирующий экстрактор для каждой включенной категории
и сливает результаты в один объект по локалям:
{"<locale>": {"numbers": {...}, "pluralRules": {...}, "fields": {...}}}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple
from loguru import logger

from ..domain.categories import CATEGORY_ORDER, Category
from ..domain.exceptions import UnknownLocaleError
from .dedup_extractor import DeduplicatingExtractor, ExtractionCache


@dataclass
class MergeCollision:
    """Два источника записали один и тот же ключ для локали."""
    locale: str
    key: str
    category: Category

    def to_dict(self) -> dict:
        return {"locale": self.locale, "key": self.key, "category": self.category.value}


@dataclass
class AggregationResult:
    """Слитые данные всех категорий и диагностика."""
    data: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    errors: List[UnknownLocaleError] = field(default_factory=list)
    collisions: List[MergeCollision] = field(default_factory=list)


def merge_data(sources: Iterable[Tuple[Category, Dict[str, Dict[str, Any]]]]) -> Tuple[Dict[str, Dict[str, Any]], List[MergeCollision]]:
    """
    Сливает данные категорий по локалям.
    
    При совпадении ключей побеждает более поздний источник.
    
    Args:
        sources: Пары (категория, {locale: {key: value}}) в порядке слияния
        
    Returns:
        Слитые данные и список коллизий ключей
    """
    merged: Dict[str, Dict[str, Any]] = {}
    collisions: List[MergeCollision] = []
    
    for category, source in sources:
        for locale, values in (source or {}).items():
            target = merged.setdefault(locale, {})
            for key, value in values.items():
                if key in target:
                    logger.warning(
                        f"[Aggregator] Коллизия ключа '{key}' для {locale} "
                        f"(категория {category.value}), значение перезаписано"
                    )
                    collisions.append(MergeCollision(locale=locale, key=key, category=category))
                target[key] = value
    
    return merged, collisions


class CategoryAggregator:
    """Прогоняет экстракторы категорий и сливает их результаты."""
    
    def __init__(self, extractors: List[DeduplicatingExtractor]):
        """
        Args:
            extractors: Экстракторы включенных категорий (сортируются по CATEGORY_ORDER)
        """
        self.extractors = sorted(extractors, key=lambda e: CATEGORY_ORDER.index(e.category))
    
    @property
    def categories(self) -> List[Category]:
        return [extractor.category for extractor in self.extractors]
    
    def aggregate(self, locales: List[str]) -> AggregationResult:
        """
        Извлекает все категории для локалей и сливает результат.
        
        Args:
            locales: Запрошенные теги локалей
            
        Returns:
            AggregationResult: Данные, ошибки локалей и коллизии
        """
        result = AggregationResult()
        sources = []
        seen_errors = set()
        
        for extractor in self.extractors:
            # Каждой категории свой кэш
            run = extractor.extract(locales, cache=ExtractionCache())
            sources.append((extractor.category, run.entries))
            
            for error in run.errors:
                if error.locale not in seen_errors:
                    seen_errors.add(error.locale)
                    result.errors.append(error)
        
        result.data, result.collisions = merge_data(sources)
        
        logger.info(
            f"[Aggregator] Категории {[c.value for c in self.categories]}: "
            f"{len(result.data)} локалей в результате"
        )
        return result
