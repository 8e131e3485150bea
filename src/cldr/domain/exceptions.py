"""
Исключения для домена CLDR.

Специфичные для извлечения и сжатия данных CLDR ошибки.
"""


class CLDRExtractionError(Exception):
    """Базовое исключение для ошибок домена CLDR."""
    
    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())
    
    def _format_message(self) -> str:
        msg = f"CLDR Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class UnknownLocaleError(CLDRExtractionError):
    """Локаль не удалось нормализовать через реестр."""
    
    def __init__(self, locale: str, component: str = "LocaleRegistry"):
        self.locale = locale
        super().__init__(
            message=f"Неизвестная локаль: '{locale}'",
            component=component,
        )


class MissingCategoryDataError(CLDRExtractionError):
    """Загрузчик вызван для локали без данных категории."""
    
    def __init__(self, locale: str, category: str, component: str = "FieldLoader"):
        self.locale = locale
        self.category = category
        super().__init__(
            message=f"Нет данных категории '{category}' для локали '{locale}'",
            component=component,
        )


class ExtractionConfigurationError(CLDRExtractionError):
    """Некорректная конфигурация извлечения."""
    pass


class CLDRFileSystemError(CLDRExtractionError):
    """Ошибка файловой системы в домене CLDR."""
    pass


class CLDRFileNotFoundError(CLDRFileSystemError):
    """Файл не найден в домене CLDR."""
    pass


class CLDRFileWriteError(CLDRFileSystemError):
    """Ошибка записи файла в домене CLDR."""
    pass


class CLDRDataFormatError(CLDRExtractionError):
    """Ошибка формата данных (неожиданная структура CLDR JSON)."""
    pass
