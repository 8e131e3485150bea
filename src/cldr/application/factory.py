"""
Фабрика для создания компонентов домена CLDR.

Предоставляет удобные методы для создания и конфигурации
всех компонентов домена CLDR через единый интерфейс.
"""

from pathlib import Path
from typing import Iterable, Optional
from loguru import logger

from config.settings import CLDR_DATA_DIR

from ..domain.categories import Category
from ..domain.interfaces import IFieldLoader, ILocaleRegistry
from ..extraction.aggregator import CategoryAggregator
from ..extraction.dedup_extractor import DeduplicatingExtractor
from ..extraction.field_loader import CLDRFieldLoader
from ..infrastructure.cldr_source import CLDRDataSource
from ..locales.locale_registry import CLDRLocaleRegistry


class CLDRComponentFactory:
    """
    Фабрика для создания компонентов домена CLDR.
    
    Домен CLDR отвечает за:
    - Разрешение локалей и их иерархии
    - Загрузку полей категорий
    - Дедупликацию данных по иерархии
    - Слияние категорий по локалям
    """
    
    @staticmethod
    def create_source(cldr_dir: Optional[Path] = None) -> CLDRDataSource:
        """
        Создает источник сырых данных CLDR.
        
        Args:
            cldr_dir: Корень пакетов cldr-json (по умолчанию CLDR_DATA_DIR)
        """
        cldr_dir = Path(cldr_dir) if cldr_dir else CLDR_DATA_DIR
        logger.debug(f"[CLDR] Создание источника данных: {cldr_dir}")
        return CLDRDataSource(cldr_dir)
    
    @staticmethod
    def create_registry(source: CLDRDataSource) -> ILocaleRegistry:
        logger.debug("[CLDR] Создание реестра локалей")
        return CLDRLocaleRegistry(source)
    
    @staticmethod
    def create_field_loader(source: CLDRDataSource) -> IFieldLoader:
        logger.debug("[CLDR] Создание загрузчика полей")
        return CLDRFieldLoader(source)
    
    @staticmethod
    def create_extractor(
        category: Category,
        registry: ILocaleRegistry,
        loader: IFieldLoader,
    ) -> DeduplicatingExtractor:
        """
        Создает дедуплицирующий экстрактор для категории.
        
        Returns:
            Экстрактор одной категории
        """
        logger.debug(f"[CLDR] Создание экстрактора: {category.value}")
        return DeduplicatingExtractor(registry, loader, category)
    
    @staticmethod
    def create_aggregator(
        categories: Iterable[Category],
        registry: ILocaleRegistry,
        loader: IFieldLoader,
    ) -> CategoryAggregator:
        """
        Создает агрегатор для набора категорий.
        
        Args:
            categories: Включенные категории
            registry: Реестр локалей
            loader: Загрузчик полей
            
        Returns:
            Агрегатор с экстрактором на каждую категорию
        """
        extractors = [
            CLDRComponentFactory.create_extractor(category, registry, loader)
            for category in categories
        ]
        return CategoryAggregator(extractors)
