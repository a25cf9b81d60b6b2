# src/common/utils.py
"""
Мелкие утилиты общего назначения.
"""

from __future__ import annotations

import re


def normalize_phone(value: str) -> str:
    """
    Нормализует номер телефона: оставляет только цифры и ведущий '+'.

    Examples:
        >>> normalize_phone("082 123 4567")
        '0821234567'
        >>> normalize_phone("+27 (82) 123-4567")
        '+27821234567'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)
