"""
Application слой домена CLDR.

Содержит фабрику компонентов и точку входа extract_data.
"""

from .factory import CLDRComponentFactory
from .api import CLDRDataExtractor, extract_data, build_options, enabled_categories

__all__ = [
    "CLDRComponentFactory",
    "CLDRDataExtractor",
    "extract_data",
    "build_options",
    "enabled_categories",
]
