"""
Точка входа домена CLDR.

Принимает список локалей и флаги категорий, возвращает
объект {locale: {category_key: fields}}.

Пример:
    extract_data({"locales": ["en-GB", "fr"], "pluralRules": True})
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from loguru import logger
from pydantic import ValidationError

from contracts.extraction_dto import ExtractionOptions, ExtractionReport

from ..domain.categories import Category
from ..domain.exceptions import ExtractionConfigurationError
from ..domain.interfaces import IFieldLoader, ILocaleRegistry
from .factory import CLDRComponentFactory


OptionsInput = Union[ExtractionOptions, Dict[str, Any], None]


def _option_key(name: str) -> str:
    """Приводит имя опции к alias модели (plural_rules -> pluralRules)."""
    field = ExtractionOptions.model_fields.get(name)
    if field is not None and field.alias:
        return field.alias
    return name


def build_options(options: OptionsInput = None, **kwargs) -> ExtractionOptions:
    """
    Приводит опции к ExtractionOptions.
    
    snake_case и camelCase имена опций равноправны: kwargs перекрывают
    options независимо от формы имени.
    
    Args:
        options: ExtractionOptions, словарь или None
        **kwargs: Опции поверх options
        
    Raises:
        ExtractionConfigurationError: Если опции невалидны
    """
    if isinstance(options, ExtractionOptions):
        if not kwargs:
            return options
        options = options.model_dump(by_alias=True)
    
    values = {_option_key(key): value for key, value in dict(options or {}).items()}
    values.update({_option_key(key): value for key, value in kwargs.items()})
    
    try:
        return ExtractionOptions.model_validate(values)
    except ValidationError as e:
        raise ExtractionConfigurationError(
            message=f"Некорректные опции извлечения: {sorted(values)}",
            component="CLDRDataExtractor",
            original_error=e
        ) from e


def enabled_categories(options: ExtractionOptions) -> List[Category]:
    """Категории в порядке слияния. Числа включены всегда."""
    categories = [Category.NUMBERS]
    if options.plural_rules:
        categories.append(Category.PLURAL_RULES)
    if options.relative_fields:
        categories.append(Category.RELATIVE_FIELDS)
    return categories


class CLDRDataExtractor:
    """
    Извлекает и сжимает данные CLDR для набора локалей.
    
    Реестр и загрузчик можно передать явно (например, для тестов);
    иначе они создаются фабрикой из cldr_dir.
    """
    
    def __init__(
        self,
        cldr_dir: Optional[Path] = None,
        registry: Optional[ILocaleRegistry] = None,
        loader: Optional[IFieldLoader] = None,
    ):
        if registry is None or loader is None:
            source = CLDRComponentFactory.create_source(cldr_dir)
            registry = registry or CLDRComponentFactory.create_registry(source)
            loader = loader or CLDRComponentFactory.create_field_loader(source)
        
        self.registry = registry
        self.loader = loader
    
    def run(self, options: OptionsInput = None, **kwargs) -> ExtractionReport:
        """
        Извлекает данные и возвращает полный отчет.
        
        Returns:
            ExtractionReport: Данные, неизвестные локали, коллизии
        """
        options = build_options(options, **kwargs)
        
        # По умолчанию - все локали CLDR
        locales = options.locales
        if locales is None:
            locales = self.registry.get_all_locales()
        
        categories = enabled_categories(options)
        logger.info(
            f"[CLDRDataExtractor] Старт: {len(locales)} локалей, "
            f"категории {[c.value for c in categories]}"
        )
        
        aggregator = CLDRComponentFactory.create_aggregator(categories, self.registry, self.loader)
        result = aggregator.aggregate(list(locales))
        
        for error in result.errors:
            logger.warning(f"[CLDRDataExtractor] {error.message}")
        
        return ExtractionReport(
            data=result.data,
            categories=[c.value for c in aggregator.categories],
            unknown_locales=[error.locale for error in result.errors],
            collisions=[collision.to_dict() for collision in result.collisions],
        )


def extract_data(options: OptionsInput = None, *, cldr_dir: Optional[Path] = None, **kwargs) -> Dict[str, Dict[str, Any]]:
    """
    Извлекает сжатые данные CLDR.
    
    Args:
        options: {"locales": [...] | None, "pluralRules": bool, "relativeFields": bool}
        cldr_dir: Корень пакетов cldr-json (по умолчанию CLDR_DATA_DIR)
        **kwargs: Опции поверх options
        
    Returns:
        Dict: {locale: {"numbers": ..., "pluralRules": ..., "fields": ...}}
    """
    return CLDRDataExtractor(cldr_dir).run(options, **kwargs).data
