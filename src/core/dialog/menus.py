# src/core/dialog/menus.py
"""
Постраничные меню USSD.

Страница нумеруется с 1, пункты на странице - с 1 от начала среза.
Пункт "0. More" добавляется, только если за срезом есть ещё элементы.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from src.common.constants import MORE_OPTION
from src.common.exceptions import OutOfRangeError, ValidationError


T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """Срез списка для одной страницы."""
    items: list[T]
    has_more: bool
    total: int


def paginate(items: Sequence[T], page: int = 1, page_size: int = 6) -> Page[T]:
    """
    Возвращает срез [(page-1)*size : page*size].

    Args:
        items: Полный список
        page: Номер страницы (с 1)
        page_size: Размер страницы
    """
    total = len(items)
    start = (page - 1) * page_size
    end = start + page_size
    return Page(items=list(items[start:end]), has_more=end < total, total=total)


def build_menu(labels: Sequence[str], page: int = 1, page_size: int = 6, title: str = "") -> str:
    """
    Собирает текст меню для страницы.

    Пример (page_size=2):
        Select town:
        1. Johannesburg
        2. Sandton
        0. More
    """
    current = paginate(labels, page, page_size)
    lines = [title] if title else []
    lines.extend(f"{idx}. {label}" for idx, label in enumerate(current.items, start=1))
    if current.has_more:
        lines.append(f"{MORE_OPTION}. More")
    return "\n".join(lines)


def parse_selection(text: str) -> int:
    """
    Разбирает ввод абонента как номер пункта.

    Raises:
        ValidationError: Ввод не число
    """
    value = (text or "").strip()
    if not value or not value.isascii() or not value.isdigit():
        raise ValidationError(f"Non-numeric selection: {text!r}")
    return int(value)


def resolve_index(page: int, page_size: int, selection: int, total: int) -> int:
    """
    Переводит номер пункта на странице в индекс полного списка.

    Raises:
        OutOfRangeError: Индекс вне [0, total)
    """
    # Номера за пределами страницы не показывались абоненту
    if not 1 <= selection <= page_size:
        raise OutOfRangeError(f"Selection {selection} is out of range")
    index = (page - 1) * page_size + (selection - 1)
    if index >= total:
        raise OutOfRangeError(f"Selection {selection} on page {page} is out of range")
    return index
