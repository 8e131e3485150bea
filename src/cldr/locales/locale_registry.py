"""
Реестр локалей CLDR.

Разрешает теги локалей в канонический вид и строит иерархию наследования:
en-GB -> en-001 -> en -> root.
"""

from typing import Dict, List, Optional
from loguru import logger

from config.settings import ROOT_LOCALE, SUBTAG_SEPARATOR

from ..domain.categories import Category
from ..domain.exceptions import UnknownLocaleError
from ..domain.interfaces import ILocaleRegistry
from ..infrastructure.cldr_source import CLDRDataSource


class CLDRLocaleRegistry(ILocaleRegistry):
    """
    Реестр всех доступных локалей CLDR.
    
    Загружает список локалей и явные связи родителей из cldr-core.
    Индекс нормализации строится один раз при первом обращении.
    """
    
    def __init__(self, source: CLDRDataSource):
        """
        Args:
            source: Источник сырых данных CLDR
        """
        self.source = source
        self._index: Optional[Dict[str, str]] = None
    
    @staticmethod
    def _key(locale: str) -> str:
        """Ключ для регистронезависимого поиска (en_GB -> en-gb)."""
        return locale.replace("_", SUBTAG_SEPARATOR).lower()
    
    def _get_index(self) -> Dict[str, str]:
        if self._index is None:
            index = {self._key(ROOT_LOCALE): ROOT_LOCALE}
            for locale in self.source.available_locales():
                index[self._key(locale)] = locale
            self._index = index
            logger.info(f"[LocaleRegistry] Реестр локалей инициализирован: {len(index)} локалей")
        return self._index
    
    def normalize(self, locale: str) -> str:
        """
        Приводит тег локали к каноническому виду.
        
        Raises:
            UnknownLocaleError: Если локаль не зарегистрирована
        """
        if not isinstance(locale, str) or not locale.strip():
            raise UnknownLocaleError(str(locale))
        
        canonical = self._get_index().get(self._key(locale.strip()))
        if canonical is None:
            raise UnknownLocaleError(locale)
        return canonical
    
    def get_parent(self, locale: str) -> Optional[str]:
        """
        Возвращает родителя локали.
        
        Порядок: явная запись parentLocales, затем отсечение последнего
        субтега, затем root. У самого root родителя нет.
        """
        if locale == ROOT_LOCALE:
            return None
        
        explicit = self.source.parent_locales().get(locale)
        if explicit:
            return explicit
        
        if SUBTAG_SEPARATOR in locale:
            return locale.rsplit(SUBTAG_SEPARATOR, 1)[0]
        
        return ROOT_LOCALE
    
    def has_data(self, locale: str, category: Category) -> bool:
        return self.source.has_data(locale, category)
    
    def get_all_locales(self) -> List[str]:
        """Возвращает все известные локали кроме root."""
        return sorted(
            locale for locale in self._get_index().values()
            if locale != ROOT_LOCALE
        )
    
    def get_ancestors(self, locale: str) -> List[str]:
        """
        Возвращает цепочку предков локали от родителя до root.
        
        Args:
            locale: Канонический тег локали
            
        Returns:
            List[str]: Например ['en-001', 'en', 'root'] для en-GB
        """
        chain = []
        parent = self.get_parent(locale)
        while parent is not None:
            chain.append(parent)
            parent = self.get_parent(parent)
        return chain
