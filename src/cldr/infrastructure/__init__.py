"""
Infrastructure слой домена CLDR.

Содержит файловые операции и источник сырых данных CLDR.
"""

from .file_manager import CLDRFileManager
from .cldr_source import CLDRDataSource

__all__ = [
    "CLDRFileManager",
    "CLDRDataSource",
]
