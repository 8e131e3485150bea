"""
DTO контракт: вызывающий код <-> домен CLDR

Опции извлечения и отчет о результате.
Имена опций совпадают с исходным JS API (pluralRules, relativeFields),
snake_case имена тоже принимаются.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ExtractionOptions(BaseModel):
    """
    Опции извлечения данных CLDR.

    Числа извлекаются всегда, отдельного флага для них нет.
    """

    locales: Optional[List[str]] = Field(
        None, description="Теги локалей; None - все известные локали"
    )
    plural_rules: StrictBool = Field(
        False, alias="pluralRules", description="Извлекать правила плюрализации"
    )
    relative_fields: StrictBool = Field(
        False, alias="relativeFields", description="Извлекать поля относительного времени"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class ExtractionReport(BaseModel):
    """
    Отчет об извлечении.

    data - JSON-сериализуемый объект {locale: {category_key: fields}}.
    """

    data: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, description="Сжатые данные по локалям"
    )
    categories: List[str] = Field(
        default_factory=list, description="Извлеченные категории в порядке слияния"
    )
    unknown_locales: List[str] = Field(
        default_factory=list, description="Теги, которые не удалось разрешить"
    )
    collisions: List[Dict[str, str]] = Field(
        default_factory=list, description="Коллизии ключей при слиянии категорий"
    )

    model_config = ConfigDict(frozen=True)
