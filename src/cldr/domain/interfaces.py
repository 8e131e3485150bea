"""
Интерфейсы (абстрактные классы) для домена CLDR.

Домен CLDR отвечает за:
1. Разрешение локалей и их иерархии (реестр)
2. Загрузку сырых данных категорий
3. Дедупликацию данных по иерархии локалей
4. Слияние категорий в единый объект по локалям
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .categories import Category


class ILocaleRegistry(ABC):
    """Интерфейс реестра локалей (домен CLDR)."""
    
    @abstractmethod
    def normalize(self, locale: str) -> str:
        """
        Приводит тег локали к каноническому виду.
        
        Args:
            locale: Тег локали в произвольном регистре (en_gb, EN-GB)
            
        Returns:
            Канонический тег (en-GB)
            
        Raises:
            UnknownLocaleError: Если локаль неизвестна
        """
        pass
    
    @abstractmethod
    def get_parent(self, locale: str) -> Optional[str]:
        """
        Возвращает непосредственного родителя локали.
        
        Args:
            locale: Канонический тег локали
            
        Returns:
            Канонический тег родителя или None для корневой локали
        """
        pass
    
    @abstractmethod
    def has_data(self, locale: str, category: Category) -> bool:
        """
        Проверяет наличие собственных данных категории у локали.
        
        Args:
            locale: Канонический тег локали
            category: Категория данных
            
        Returns:
            True если данные есть именно у этой локали
        """
        pass
    
    @abstractmethod
    def get_all_locales(self) -> List[str]:
        """
        Возвращает все известные локали (без корневой).
        
        Returns:
            Отсортированный список канонических тегов
        """
        pass


class IFieldLoader(ABC):
    """Интерфейс загрузчика полей категории (домен CLDR)."""
    
    @abstractmethod
    def load(self, locale: str, category: Category) -> Dict[str, Any]:
        """
        Загружает поля категории, урезанные до whitelist.
        
        Args:
            locale: Канонический тег локали
            category: Категория данных
            
        Returns:
            Словарь ровно с ключами whitelist категории
            
        Raises:
            MissingCategoryDataError: Если у локали нет данных категории
        """
        pass
