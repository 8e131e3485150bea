"""
Менеджер файлов для домена CLDR.

Реализует файловые операции специфичные для домена CLDR:
чтение CLDR JSON и запись сжатых данных локалей.
"""

import json
from pathlib import Path
from typing import Dict, Any
from loguru import logger

from ..domain.exceptions import (
    CLDRFileNotFoundError,
    CLDRFileWriteError,
    CLDRDataFormatError,
)


class CLDRFileManager:
    """Менеджер файлов для домена CLDR."""
    
    def save_json(self, data: Dict[str, Any], file_path: Path) -> Path:
        """
        Сохраняет данные в JSON файл.
        
        Args:
            data: Данные для сохранения
            file_path: Путь для сохранения
            
        Returns:
            Путь к сохраненному файлу
            
        Raises:
            CLDRFileWriteError: Если не удалось сохранить файл
        """
        try:
            # Создаем директорию если не существует
            file_path.parent.mkdir(parents=True, exist_ok=True)
            
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            
            logger.debug(f"[CLDR] Файл сохранен: {file_path}")
            return file_path
            
        except (IOError, OSError, TypeError) as e:
            raise CLDRFileWriteError(
                message=f"Не удалось сохранить JSON файл: {file_path}",
                component="CLDRFileManager",
                original_error=e
            )
    
    def load_json(self, file_path: Path) -> Dict[str, Any]:
        """
        Загружает данные из JSON файла.
        
        Args:
            file_path: Путь к файлу
            
        Returns:
            Загруженные данные
            
        Raises:
            CLDRFileNotFoundError: Если файл не существует
            CLDRDataFormatError: Если файл не является валидным JSON
        """
        if not file_path.exists():
            raise CLDRFileNotFoundError(
                message=f"Файл не найден: {file_path}",
                component="CLDRFileManager"
            )
        
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CLDRDataFormatError(
                message=f"Некорректный JSON: {file_path}",
                component="CLDRFileManager",
                original_error=e
            )
        except (IOError, OSError) as e:
            raise CLDRFileNotFoundError(
                message=f"Не удалось прочитать файл: {file_path}",
                component="CLDRFileManager",
                original_error=e
            )
        
        logger.debug(f"[CLDR] Файл загружен: {file_path}")
        return data
    
    def save_locale_groups(self, data: Dict[str, Dict[str, Any]], output_dir: Path) -> Dict[str, Path]:
        """
        Сохраняет данные локалей по группам языков: один файл на язык.
        
        Локали en, en-GB, en-001 попадают в en.json.
        
        Args:
            data: Сжатые данные {locale: {category_key: fields}}
            output_dir: Директория для сохранения
            
        Returns:
            Словарь {язык: путь к файлу}
        """
        groups: Dict[str, Dict[str, Any]] = {}
        for locale, locale_data in data.items():
            language = locale.split("-", 1)[0]
            groups.setdefault(language, {})[locale] = locale_data
        
        saved = {}
        for language in sorted(groups):
            saved[language] = self.save_json(groups[language], output_dir / f"{language}.json")
        
        logger.info(f"[CLDR] Сохранено {len(saved)} языковых групп в {output_dir}")
        return saved
