"""
Контракты DTO проекта CLDR Compact.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Сырые файлы CLDR -> домен CLDR: cldr_schema.py
- Вызывающий код <-> домен CLDR: ExtractionOptions, ExtractionReport (extraction_dto.py)
"""

# CLDR JSON
from .cldr_schema import (
    AvailableLocalesFile,
    ParentLocalesFile,
    PluralsFile,
)

# API
from .extraction_dto import ExtractionOptions, ExtractionReport

__all__ = [
    # CLDR JSON
    "AvailableLocalesFile",
    "ParentLocalesFile",
    "PluralsFile",
    # API
    "ExtractionOptions",
    "ExtractionReport",
]
