"""
Настройки проекта CLDR Compact.

ВАЖНО: Перед запуском укажите путь к распакованным CLDR JSON пакетам
(cldr-core, cldr-numbers-full, cldr-dates-full) через CLDR_DATA_DIR!
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = DATA_DIR / "output"

# Корень с CLDR JSON пакетами (node_modules-подобная раскладка)
CLDR_DATA_DIR = Path(os.getenv("CLDR_DATA_DIR", str(DATA_DIR / "cldr-json")))

# =============================================================================
# CLDR
# =============================================================================
# Корневая локаль иерархии - никогда не попадает в выходные данные
ROOT_LOCALE = "root"

# Разделитель субтегов в канонической форме (en-GB)
SUBTAG_SEPARATOR = "-"

# Поля чисел, которые нужны runtime библиотекам
NUMBER_FIELD_NAMES = [
    "decimalFormats-numberSystem-latn",
    "currencyFormats-numberSystem-latn",
]

# Типы правил плюрализации
PLURAL_RULE_TYPES = [
    "cardinal",
    "ordinal",
]

# Поля относительного времени (dateFields.json)
RELATIVE_FIELD_NAMES = [
    "year", "year-short",
    "month", "month-short",
    "week", "week-short",
    "day", "day-short",
    "hour", "hour-short",
    "minute", "minute-short",
    "second", "second-short",
]

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("CLDR_LOG_LEVEL", "INFO")


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config(cldr_dir: Path = None):
    """Проверяет корректность конфигурации."""
    cldr_dir = Path(cldr_dir) if cldr_dir else CLDR_DATA_DIR
    errors = []

    if not cldr_dir.exists():
        errors.append(
            f"Директория CLDR не найдена: {cldr_dir}\n"
            "Укажите путь через переменную окружения CLDR_DATA_DIR или --cldr-dir."
        )
    elif not (cldr_dir / "cldr-core").exists():
        errors.append(
            f"Пакет cldr-core не найден в {cldr_dir}"
        )

    if errors:
        raise ValueError("\n".join(errors))

    return True
