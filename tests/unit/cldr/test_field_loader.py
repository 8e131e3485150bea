"""
Unit-тесты для CLDRFieldLoader.

ЦКП: Поля категории урезаются ровно до whitelist.
"""

import pytest

from config.settings import NUMBER_FIELD_NAMES, PLURAL_RULE_TYPES, RELATIVE_FIELD_NAMES
from src.cldr.domain.categories import Category
from src.cldr.domain.exceptions import CLDRDataFormatError, MissingCategoryDataError
from src.cldr.extraction.field_loader import (
    CLDRFieldLoader,
    transform_plural_rules,
    transform_relative_field,
)
from src.cldr.infrastructure.cldr_source import CLDRDataSource


@pytest.fixture
def loader(cldr_dir):
    return CLDRFieldLoader(CLDRDataSource(cldr_dir))


class TestWhitelistTrimming:
    """Загруженные поля содержат ровно ключи whitelist."""
    
    @pytest.mark.parametrize("category,expected", [
        (Category.NUMBERS, NUMBER_FIELD_NAMES),
        (Category.PLURAL_RULES, PLURAL_RULE_TYPES),
        (Category.RELATIVE_FIELDS, RELATIVE_FIELD_NAMES),
    ])
    def test_exact_whitelist_keys(self, loader, category, expected):
        fields = loader.load("en", category)
        assert list(fields) == expected
    
    def test_extra_number_fields_dropped(self, loader):
        fields = loader.load("en", Category.NUMBERS)
        assert "symbols-numberSystem-latn" not in fields
        assert "defaultNumberingSystem" not in fields
        assert fields["currencyFormats-numberSystem-latn"] == {"standard": "¤#,##0.00"}
    
    def test_missing_whitelisted_field_is_none(self, loader):
        fields = loader.load("fr", Category.RELATIVE_FIELDS)
        assert fields["day"] is not None
        assert fields["year"] is None
        assert "era" not in fields


class TestTransforms:
    """Тесты преобразования сырых полей."""
    
    def test_relative_field(self):
        raw = {
            "displayName": "day",
            "relative-type--1": "yesterday",
            "relative-type-0": "today",
            "relativeTime-type-future": {"relativeTimePattern-count-one": "in {0} day"},
            "relativeTime-type-past": {"relativeTimePattern-count-other": "{0} days ago"},
        }
        assert transform_relative_field(raw) == {
            "displayName": "day",
            "relative": {"-1": "yesterday", "0": "today"},
            "relativeTime": {
                "future": {"one": "in {0} day"},
                "past": {"other": "{0} days ago"},
            },
        }
    
    def test_plural_rules_prefix_stripped(self):
        raw = {"pluralRule-count-one": "i = 1", "pluralRule-count-other": ""}
        assert transform_plural_rules(raw) == {"one": "i = 1", "other": ""}
    
    def test_none_passthrough(self):
        assert transform_relative_field(None) is None
        assert transform_plural_rules(None) is None
    
    def test_plural_rules_loaded(self, loader):
        fields = loader.load("en", Category.PLURAL_RULES)
        assert fields["cardinal"]["one"] == "i = 1 and v = 0 @integer 1"
        assert fields["ordinal"]["one"] == "n % 10 = 1 and n % 100 != 11"
        
        # У fr нет ordinal правил
        assert loader.load("fr", Category.PLURAL_RULES)["ordinal"] is None


class TestMissingData:
    """Загрузка для локали без данных."""
    
    def test_missing_category_data_raises(self, loader):
        with pytest.raises(MissingCategoryDataError) as exc_info:
            loader.load("en-GB", Category.PLURAL_RULES)
        assert exc_info.value.locale == "en-GB"
        assert exc_info.value.category == "plural_rules"
    
    def test_broken_structure_raises_format_error(self, cldr_builder):
        cldr_builder.add_numbers("en", "#", "#")
        cldr_dir = cldr_builder.build()
        path = cldr_dir / "cldr-numbers-full" / "main" / "en" / "numbers.json"
        path.write_text('{"main": {"other": {}}}', encoding="utf-8")
        
        with pytest.raises(CLDRDataFormatError):
            CLDRFieldLoader(CLDRDataSource(cldr_dir)).load("en", Category.NUMBERS)
