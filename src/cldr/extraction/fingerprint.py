"""
Отпечатки полей для сравнения на точное структурное равенство.

Отпечаток - каноническая JSON сериализация с явной сортировкой ключей.
Два словаря полей одинаковы тогда и только тогда, когда их отпечатки равны.
"""

import json
from typing import Any, Dict


def fingerprint(fields: Dict[str, Any]) -> str:
    """
    Возвращает канонический отпечаток словаря полей.
    
    Args:
        fields: Словарь полей категории
        
    Returns:
        str: Детерминированная JSON строка
    """
    return json.dumps(fields, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
