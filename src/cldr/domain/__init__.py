"""
Domain layer для домена CLDR.

Содержит интерфейсы, категории и исключения.
"""

from .categories import Category, CATEGORY_ORDER
from .interfaces import ILocaleRegistry, IFieldLoader
from .exceptions import (
    CLDRExtractionError,
    UnknownLocaleError,
    MissingCategoryDataError,
    ExtractionConfigurationError,
    CLDRFileSystemError,
    CLDRFileNotFoundError,
    CLDRFileWriteError,
    CLDRDataFormatError,
)

__all__ = [
    # Категории
    "Category",
    "CATEGORY_ORDER",
    
    # Интерфейсы
    "ILocaleRegistry",
    "IFieldLoader",
    
    # Исключения
    "CLDRExtractionError",
    "UnknownLocaleError",
    "MissingCategoryDataError",
    "ExtractionConfigurationError",
    "CLDRFileSystemError",
    "CLDRFileNotFoundError",
    "CLDRFileWriteError",
    "CLDRDataFormatError",
]
