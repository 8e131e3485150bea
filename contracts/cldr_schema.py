"""
Контракт для сырых файлов CLDR JSON.

Описывает только те части cldr-core/supplemental, которые читает
домен CLDR. Лишние ключи CLDR игнорируются.

ВНИМАНИЕ: Структура соответствует пакетам cldr-json (unicode-org/cldr-json).
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class AvailableLocales(BaseModel):
    """Список локалей из availableLocales.json."""

    full: List[str] = Field(default_factory=list, description="Все локали пакета -full")

    model_config = ConfigDict(extra="ignore")


class AvailableLocalesFile(BaseModel):
    """cldr-core/availableLocales.json"""

    available_locales: AvailableLocales = Field(..., alias="availableLocales")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ParentLocales(BaseModel):
    """Явные родители локалей (en-GB -> en-001)."""

    parent_locale: Dict[str, str] = Field(default_factory=dict, alias="parentLocale")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ParentLocalesSupplemental(BaseModel):
    parent_locales: ParentLocales = Field(..., alias="parentLocales")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ParentLocalesFile(BaseModel):
    """cldr-core/supplemental/parentLocales.json"""

    supplemental: ParentLocalesSupplemental

    model_config = ConfigDict(extra="ignore")


class PluralsSupplemental(BaseModel):
    """Правила плюрализации: {locale: {"pluralRule-count-one": rule}}."""

    cardinal: Dict[str, Dict[str, str]] = Field(default_factory=dict, alias="plurals-type-cardinal")
    ordinal: Dict[str, Dict[str, str]] = Field(default_factory=dict, alias="plurals-type-ordinal")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PluralsFile(BaseModel):
    """cldr-core/supplemental/plurals.json и ordinals.json"""

    supplemental: PluralsSupplemental

    model_config = ConfigDict(extra="ignore")
