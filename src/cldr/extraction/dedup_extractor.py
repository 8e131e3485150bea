"""
Дедуплицирующий экстрактор данных категории.

ЦКП: Минимальный набор записей локалей, из которого runtime может
восстановить данные каждой запрошенной локали через fallback к предкам.

Алгоритм поиска предка (для каждой запрошенной локали):
1. Нет родителя или родитель root -> сама локаль
2. У локали нет данных -> поднимаемся к родителю
3. У родителя есть данные -> сравниваем отпечатки; равны -> поднимаемся,
   иначе -> сама локаль
4. У родителя нет данных -> сама локаль

Кэши (поля и отпечатки) живут один запуск и передаются явно.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
from loguru import logger

from config.settings import ROOT_LOCALE

from ..domain.categories import Category
from ..domain.exceptions import MissingCategoryDataError, UnknownLocaleError
from ..domain.interfaces import IFieldLoader, ILocaleRegistry
from .fingerprint import fingerprint


@dataclass
class ExtractionCache:
    """
    Кэши одного запуска экстрактора.
    
    Ключ пишется только после успешной загрузки.
    """
    fields: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    fingerprints: Dict[str, str] = field(default_factory=dict)
    default_fields: Optional[Dict[str, Any]] = None


@dataclass
class ExtractionRun:
    """Результат запуска экстрактора для одной категории."""
    category: Category
    # {locale: {output_key: fields}}
    entries: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    # Запрошенная (нормализованная) локаль -> локаль записи (или root)
    resolved: Dict[str, str] = field(default_factory=dict)
    errors: List[UnknownLocaleError] = field(default_factory=list)


class DeduplicatingExtractor:
    """
    Экстрактор одной категории с дедупликацией по иерархии локалей.
    
    Локаль получает собственную запись только если её данные отличаются
    от данных ближайшего предка, который сам попадёт в выходные данные.
    """
    
    def __init__(self, registry: ILocaleRegistry, loader: IFieldLoader, category: Category):
        """
        Args:
            registry: Реестр локалей (нормализация, родители, наличие данных)
            loader: Загрузчик полей категории
            category: Извлекаемая категория
        """
        self.registry = registry
        self.loader = loader
        self.category = category
    
    def extract(self, locales: Iterable[str], cache: Optional[ExtractionCache] = None) -> ExtractionRun:
        """
        Извлекает минимальный набор записей для запрошенных локалей.
        
        Args:
            locales: Запрошенные теги локалей
            cache: Кэш запуска (по умолчанию создается новый)
            
        Returns:
            ExtractionRun: Записи, разрешения и ошибки неизвестных локалей
            
        Raises:
            MissingCategoryDataError: Если нужны данные по умолчанию, а у root их нет
        """
        cache = cache if cache is not None else ExtractionCache()
        run = ExtractionRun(category=self.category)
        
        for requested in locales:
            try:
                locale = self.registry.normalize(requested)
            except UnknownLocaleError as e:
                logger.warning(f"[DedupExtractor] {self.category.value}: пропуск локали: {e.message}")
                run.errors.append(e)
                continue
            
            target = self.find_greatest_ancestor(locale, cache)
            run.resolved[locale] = target
            
            # root не попадает в выходные данные
            if target == ROOT_LOCALE:
                continue
            
            fields = self.get_fields(target, cache)
            if fields is None:
                fields = self.get_default_fields(cache)
            
            run.entries[target] = {self.category.output_key: copy.deepcopy(fields)}
        
        logger.info(
            f"[DedupExtractor] {self.category.value}: {len(run.resolved)} локалей -> "
            f"{len(run.entries)} записей, ошибок: {len(run.errors)}"
        )
        return run
    
    def find_greatest_ancestor(self, locale: str, cache: ExtractionCache) -> str:
        """
        Находит самого дальнего предка с точно такими же данными.
        
        Args:
            locale: Канонический тег локали
            cache: Кэш запуска
            
        Returns:
            str: Локаль, под которой будет запись (или root)
        """
        while True:
            parent = self.registry.get_parent(locale)
            
            # root не годится в предки: записи для него не будет
            if not parent or parent == ROOT_LOCALE:
                return locale
            
            if not self.registry.has_data(locale, self.category):
                locale = parent
                continue
            
            if self.registry.has_data(parent, self.category):
                fields = self.get_fields(locale, cache)
                parent_fields = self.get_fields(parent, cache)
                
                if self.get_fingerprint(locale, fields, cache) == \
                        self.get_fingerprint(parent, parent_fields, cache):
                    locale = parent
                    continue
            
            return locale
    
    def get_fields(self, locale: str, cache: ExtractionCache) -> Optional[Dict[str, Any]]:
        """Загружает и кэширует поля локали. None если данных нет."""
        if locale in cache.fields:
            return cache.fields[locale]
        
        if not self.registry.has_data(locale, self.category):
            return None
        
        fields = self.loader.load(locale, self.category)
        cache.fields[locale] = fields
        return fields
    
    def get_fingerprint(self, locale: str, fields: Dict[str, Any], cache: ExtractionCache) -> str:
        """Вычисляет и кэширует отпечаток полей локали."""
        if locale not in cache.fingerprints:
            cache.fingerprints[locale] = fingerprint(fields)
        return cache.fingerprints[locale]
    
    def get_default_fields(self, cache: ExtractionCache) -> Dict[str, Any]:
        """
        Возвращает поля root - значения по умолчанию для категории.
        
        Raises:
            MissingCategoryDataError: Если у root нет данных категории
        """
        if cache.default_fields is not None:
            return cache.default_fields
        
        fields = self.get_fields(ROOT_LOCALE, cache)
        if fields is None:
            raise MissingCategoryDataError(ROOT_LOCALE, self.category.value, component="DedupExtractor")
        
        if all(value is None for value in fields.values()):
            logger.warning(
                f"[DedupExtractor] {self.category.value}: данные root пусты, "
                f"локали без данных будут неотличимы от отсутствия данных"
            )
        
        cache.default_fields = fields
        return fields
