"""
Источник сырых данных CLDR JSON.

Раскладка директорий (как у npm пакетов cldr-json):
cldr_dir/
  ├── cldr-core/
  │   ├── availableLocales.json
  │   └── supplemental/
  │       ├── parentLocales.json
  │       ├── plurals.json
  │       └── ordinals.json
  ├── cldr-numbers-full/main/<locale>/numbers.json
  └── cldr-dates-full/main/<locale>/dateFields.json

Supplemental файлы читаются один раз на экземпляр источника.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from loguru import logger
from pydantic import ValidationError

from contracts.cldr_schema import AvailableLocalesFile, ParentLocalesFile, PluralsFile

from ..domain.categories import Category
from ..domain.exceptions import CLDRDataFormatError, MissingCategoryDataError
from .file_manager import CLDRFileManager


# Расположение main-данных категорий: (пакет, имя файла)
MAIN_DATA_FILES = {
    Category.NUMBERS: ("cldr-numbers-full", "numbers.json"),
    Category.RELATIVE_FIELDS: ("cldr-dates-full", "dateFields.json"),
}


class CLDRDataSource:
    """Доступ к сырым данным CLDR на диске."""
    
    def __init__(self, cldr_dir: Path, file_manager: Optional[CLDRFileManager] = None):
        """
        Args:
            cldr_dir: Корень с распакованными пакетами cldr-json
            file_manager: Менеджер файлов (по умолчанию CLDRFileManager)
        """
        self.cldr_dir = Path(cldr_dir)
        self.file_manager = file_manager or CLDRFileManager()
        
        # Кэш supplemental данных
        self._available_locales: Optional[List[str]] = None
        self._parent_locales: Optional[Dict[str, str]] = None
        self._plurals: Optional[PluralsFile] = None
        self._ordinals: Optional[PluralsFile] = None
    
    # === Supplemental ===
    
    def available_locales(self) -> List[str]:
        """
        Возвращает список локалей из availableLocales.json.
        
        Если файла нет, сканирует директории cldr-numbers-full/main/.
        """
        if self._available_locales is not None:
            return self._available_locales
        
        path = self.cldr_dir / "cldr-core" / "availableLocales.json"
        if path.exists():
            data = self._validate(AvailableLocalesFile, path)
            locales = list(data.available_locales.full)
        else:
            main_dir = self.cldr_dir / "cldr-numbers-full" / "main"
            logger.warning(
                f"[CLDRDataSource] availableLocales.json не найден, сканируем {main_dir}"
            )
            locales = sorted(
                item.name for item in main_dir.iterdir() if item.is_dir()
            ) if main_dir.exists() else []
        
        self._available_locales = locales
        logger.debug(f"[CLDRDataSource] Доступно локалей: {len(locales)}")
        return locales
    
    def parent_locales(self) -> Dict[str, str]:
        """Возвращает явные связи child -> parent из parentLocales.json."""
        if self._parent_locales is not None:
            return self._parent_locales
        
        path = self.cldr_dir / "cldr-core" / "supplemental" / "parentLocales.json"
        if path.exists():
            data = self._validate(ParentLocalesFile, path)
            self._parent_locales = dict(data.supplemental.parent_locales.parent_locale)
        else:
            logger.warning(f"[CLDRDataSource] parentLocales.json не найден: {path}")
            self._parent_locales = {}
        
        return self._parent_locales
    
    def _plural_rules(self) -> PluralsFile:
        if self._plurals is None:
            path = self.cldr_dir / "cldr-core" / "supplemental" / "plurals.json"
            self._plurals = self._validate(PluralsFile, path)
        return self._plurals
    
    def _ordinal_rules(self) -> Optional[PluralsFile]:
        if self._ordinals is None:
            path = self.cldr_dir / "cldr-core" / "supplemental" / "ordinals.json"
            if not path.exists():
                return None
            self._ordinals = self._validate(PluralsFile, path)
        return self._ordinals
    
    # === Main data ===
    
    def main_path(self, locale: str, category: Category) -> Path:
        """Путь к main-файлу категории для локали."""
        package, filename = MAIN_DATA_FILES[category]
        return self.cldr_dir / package / "main" / locale / filename
    
    def has_data(self, locale: str, category: Category) -> bool:
        """
        Проверяет наличие собственных данных категории у локали.
        
        Args:
            locale: Канонический тег локали
            category: Категория данных
            
        Returns:
            bool: True если данные есть
        """
        if category == Category.PLURAL_RULES:
            plurals_path = self.cldr_dir / "cldr-core" / "supplemental" / "plurals.json"
            if not plurals_path.exists():
                return False
            return locale in self._plural_rules().supplemental.cardinal
        
        return self.main_path(locale, category).exists()
    
    def load_raw(self, locale: str, category: Category) -> Dict[str, Any]:
        """
        Загружает сырые данные категории для локали.
        
        Args:
            locale: Канонический тег локали
            category: Категория данных
            
        Returns:
            Сырые данные CLDR (до урезания по whitelist)
            
        Raises:
            MissingCategoryDataError: Если у локали нет данных категории
            CLDRDataFormatError: Если структура файла неожиданная
        """
        if not self.has_data(locale, category):
            raise MissingCategoryDataError(locale, category.value, component="CLDRDataSource")
        
        if category == Category.PLURAL_RULES:
            ordinals = self._ordinal_rules()
            return {
                "cardinal": self._plural_rules().supplemental.cardinal[locale],
                "ordinal": ordinals.supplemental.ordinal.get(locale) if ordinals else None,
            }
        
        path = self.main_path(locale, category)
        data = self.file_manager.load_json(path)
        
        try:
            locale_data = data["main"][locale]
            if category == Category.NUMBERS:
                return locale_data["numbers"]
            return locale_data["dates"]["fields"]
        except (KeyError, TypeError) as e:
            raise CLDRDataFormatError(
                message=f"Неожиданная структура {path} для локали '{locale}'",
                component="CLDRDataSource",
                original_error=e
            )
    
    def _validate(self, model, path: Path):
        """Загружает JSON и валидирует его через Pydantic модель."""
        data = self.file_manager.load_json(path)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"[CLDRDataSource] Ошибка валидации {path}")
            raise CLDRDataFormatError(
                message=f"Файл {path} не соответствует формату CLDR",
                component="CLDRDataSource",
                original_error=e
            ) from e
