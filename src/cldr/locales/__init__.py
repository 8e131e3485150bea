"""
Система локалей для домена CLDR.

Содержит:
- CLDRLocaleRegistry: Нормализация тегов и иерархия наследования локалей
"""

from .locale_registry import CLDRLocaleRegistry

__all__ = [
    "CLDRLocaleRegistry",
]
