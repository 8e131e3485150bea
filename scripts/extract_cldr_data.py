#!/usr/bin/env python3
"""
Точка входа для извлечения сжатых данных CLDR.

Использование:
    # Все локали, только числа -> data/output/cldr-data.json
    python scripts/extract_cldr_data.py
    
    # Конкретные локали со всеми категориями
    python scripts/extract_cldr_data.py en-GB fr de --plural-rules --relative-fields
    
    # Один файл на язык (en.json, fr.json, ...)
    python scripts/extract_cldr_data.py --group-by-language --output data/output/locales
"""

import sys
import argparse
from pathlib import Path

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from loguru import logger

from config.settings import CLDR_DATA_DIR, LOG_LEVEL, OUTPUT_DIR, validate_config
from src.cldr.application.api import CLDRDataExtractor
from src.cldr.domain.exceptions import CLDRExtractionError
from src.cldr.infrastructure.file_manager import CLDRFileManager


# Уровни loguru
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="CLDR Compact - извлечение данных локалей")
    parser.add_argument("locales", nargs="*", help="Теги локалей (по умолчанию все)")
    parser.add_argument("--plural-rules", action="store_true", help="Извлекать правила плюрализации")
    parser.add_argument("--relative-fields", action="store_true", help="Извлекать поля относительного времени")
    parser.add_argument("--cldr-dir", type=Path, default=CLDR_DATA_DIR, help="Корень пакетов cldr-json")
    parser.add_argument("--output", type=Path, default=None, help="Файл (или директория для --group-by-language)")
    parser.add_argument("--group-by-language", action="store_true", help="Один JSON файл на язык")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=LOG_LEVEL,
        help="Уровень логирования",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Главная функция извлечения."""
    args = parse_args(argv)
    
    logger.remove()
    logger.add(
        sys.stderr,
        level=args.log_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    
    try:
        validate_config(args.cldr_dir)
    except ValueError as e:
        print(f"\n[ERROR] {e}")
        return 1
    
    extractor = CLDRDataExtractor(args.cldr_dir)
    try:
        report = extractor.run(
            locales=args.locales or None,
            pluralRules=args.plural_rules,
            relativeFields=args.relative_fields,
        )
    except CLDRExtractionError as e:
        print(f"\n[ERROR] {e}")
        return 1
    
    file_manager = CLDRFileManager()
    if args.group_by_language:
        output_dir = args.output or OUTPUT_DIR / "locales"
        saved = file_manager.save_locale_groups(report.data, output_dir)
        print(f"[SAVED] {len(saved)} файлов в {output_dir}")
    else:
        output_file = args.output or OUTPUT_DIR / "cldr-data.json"
        file_manager.save_json(report.data, output_file)
        print(f"[SAVED] {output_file}")
    
    print(f"[INFO]  Локалей в результате: {len(report.data)}")
    if report.unknown_locales:
        print(f"[WARN]  Неизвестные локали: {', '.join(report.unknown_locales)}")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
