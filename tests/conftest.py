"""
Общие фикстуры: миниатюрное дерево CLDR JSON во временной директории.

Иерархия по умолчанию (numbers):
    root (R) -> en (E) -> en-001 (E) -> en-GB (E)     en-GB сворачивается в en
    root (R) -> fr (F) -> fr-CA (F2)                   fr-CA отличается от fr
    root (R) -> de (D) -> de-AT (D)                    de-AT сворачивается в de
    root (R) -> xx (нет данных)                        xx получает данные root
"""

import json
from pathlib import Path

import pytest


ROOT_NUMBERS = {"decimal": "#,##0.###", "currency": "¤ #,##0.00"}
EN_NUMBERS = {"decimal": "#,##0.###", "currency": "¤#,##0.00"}
FR_NUMBERS = {"decimal": "#,##0.###", "currency": "#,##0.00 ¤"}
FR_CA_NUMBERS = {"decimal": "#,##0.###", "currency": "#,##0.00 $ ¤"}
DE_NUMBERS = {"decimal": "#,##0.###", "currency": "#,##0.00 ¤ "}


class CLDRTreeBuilder:
    """Записывает файлы в раскладке пакетов cldr-json."""
    
    def __init__(self, root: Path):
        self.root = root
        self.locales = set()
        self.parents = {}
        self.cardinal = {}
        self.ordinal = {}
    
    def _write(self, path: Path, data: dict):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    
    def add_locale(self, locale: str):
        if locale != "root":
            self.locales.add(locale)
        return self
    
    def add_numbers(self, locale: str, decimal: str, currency: str, **extra):
        self.add_locale(locale)
        numbers = {
            "defaultNumberingSystem": "latn",
            "symbols-numberSystem-latn": {"decimal": ".", "group": ","},
            "decimalFormats-numberSystem-latn": {"standard": decimal},
            "currencyFormats-numberSystem-latn": {"standard": currency},
        }
        numbers.update(extra)
        self._write(
            self.root / "cldr-numbers-full" / "main" / locale / "numbers.json",
            {"main": {locale: {"identity": {"language": locale}, "numbers": numbers}}},
        )
        return self
    
    def add_date_fields(self, locale: str, fields: dict):
        self.add_locale(locale)
        self._write(
            self.root / "cldr-dates-full" / "main" / locale / "dateFields.json",
            {"main": {locale: {"dates": {"fields": fields}}}},
        )
        return self
    
    def add_plurals(self, locale: str, cardinal: dict, ordinal: dict = None):
        self.add_locale(locale)
        self.cardinal[locale] = {f"pluralRule-count-{k}": v for k, v in cardinal.items()}
        if ordinal is not None:
            self.ordinal[locale] = {f"pluralRule-count-{k}": v for k, v in ordinal.items()}
        return self
    
    def set_parent(self, locale: str, parent: str):
        self.parents[locale] = parent
        return self
    
    def build(self) -> Path:
        core = self.root / "cldr-core"
        self._write(core / "availableLocales.json", {
            "availableLocales": {"modern": [], "full": sorted(self.locales)},
        })
        self._write(core / "supplemental" / "parentLocales.json", {
            "supplemental": {"version": {}, "parentLocales": {"parentLocale": self.parents}},
        })
        self._write(core / "supplemental" / "plurals.json", {
            "supplemental": {"plurals-type-cardinal": self.cardinal},
        })
        self._write(core / "supplemental" / "ordinals.json", {
            "supplemental": {"plurals-type-ordinal": self.ordinal},
        })
        return self.root


def day_field(name: str, today: str, future: str, past: str) -> dict:
    """Поле dateFields.json в формате CLDR."""
    return {
        "displayName": name,
        "relative-type--1": f"yesterday ({name})",
        "relative-type-0": today,
        "relative-type-1": f"tomorrow ({name})",
        "relativeTime-type-future": {
            "relativeTimePattern-count-one": future.format(n="{0}"),
            "relativeTimePattern-count-other": future.format(n="{0}") + "s",
        },
        "relativeTime-type-past": {
            "relativeTimePattern-count-one": past.format(n="{0}"),
            "relativeTimePattern-count-other": past.format(n="{0}") + "s",
        },
    }


@pytest.fixture
def cldr_builder(tmp_path):
    """Пустой построитель дерева CLDR."""
    return CLDRTreeBuilder(tmp_path / "cldr-json")


@pytest.fixture
def cldr_dir(cldr_builder):
    """Дерево CLDR с иерархией по умолчанию (см. docstring модуля)."""
    b = cldr_builder
    b.add_numbers("root", **ROOT_NUMBERS)
    b.add_numbers("en", **EN_NUMBERS)
    b.add_numbers("en-001", **EN_NUMBERS)
    b.add_numbers("en-GB", **EN_NUMBERS)
    b.add_numbers("fr", **FR_NUMBERS)
    b.add_numbers("fr-CA", **FR_CA_NUMBERS)
    b.add_numbers("de", **DE_NUMBERS)
    b.add_numbers("de-AT", **DE_NUMBERS)
    b.add_locale("xx")
    b.set_parent("en-GB", "en-001")
    
    b.add_plurals("root", {"other": " @integer 0~15"})
    b.add_plurals("en", {"one": "i = 1 and v = 0 @integer 1", "other": " @integer 0, 2~16"},
                  ordinal={"one": "n % 10 = 1 and n % 100 != 11", "other": ""})
    b.add_plurals("fr", {"one": "i = 0,1 @integer 0, 1", "other": " @integer 2~17"})
    b.add_plurals("de", {"one": "i = 1 and v = 0 @integer 1", "other": " @integer 0, 2~16"})
    
    b.add_date_fields("root", {
        "day": day_field("Day", "today", "+{n} d", "-{n} d"),
        "era": {"displayName": "Era"},
    })
    b.add_date_fields("en", {
        "day": day_field("day", "today", "in {n} day", "{n} day ago"),
        "day-short": day_field("day", "today", "in {n} day", "{n} day ago"),
        "era": {"displayName": "era"},
    })
    b.add_date_fields("fr", {
        "day": day_field("jour", "aujourd’hui", "dans {n} jour", "il y a {n} jour"),
    })
    return b.build()
