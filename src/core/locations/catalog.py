# src/core/locations/catalog.py
"""
Каталог известных точек подачи/высадки.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from src.common.constants import TypeMsg
from src.common.logger import log_info
from src.core.geo.service import calculate_distance
from src.core.locations.loader import load_locations
from src.core.locations.models import Location


UNKNOWN_TOWN = "Unknown"


class LocationCatalog:
    """
    Упорядоченный каталог локаций.

    Порядок загрузки стабилен: номер пункта меню вычисляется от позиции в
    каталоге. Перезагрузка подменяет кортеж целиком, поэтому читатель,
    взявший снимок, никогда не увидит частично загруженные данные.
    """

    def __init__(self, locations: Iterable[Location] = ()) -> None:
        self._locations: tuple[Location, ...] = tuple(locations)

    def __len__(self) -> int:
        return len(self._locations)

    def all(self) -> tuple[Location, ...]:
        """Все локации в порядке загрузки."""
        return self._locations

    @property
    def has_coordinates(self) -> bool:
        """Есть ли в каталоге хотя бы одна зона с координатами."""
        return any(loc.has_coordinates for loc in self._locations)

    def unique_towns(self) -> list[str]:
        """Отсортированный список городов без повторов."""
        return sorted({loc.town or UNKNOWN_TOWN for loc in self._locations})

    def zones_for_town(self, town: str) -> list[Location]:
        """Зоны города (сравнение без учёта регистра), в порядке каталога."""
        # Пустой город виден в меню как UNKNOWN_TOWN и ищется под тем же именем
        wanted = (town or UNKNOWN_TOWN).lower()
        return [loc for loc in self._locations if (loc.town or UNKNOWN_TOWN).lower() == wanted]

    def within_radius(self, origin: Location, km: float) -> list[str]:
        """
        Города, у которых хотя бы одна зона не дальше km от origin.

        Если у origin нет координат или ничего не найдено - все города.
        """
        if not origin.has_coordinates:
            return self.unique_towns()

        towns = {
            loc.town or UNKNOWN_TOWN
            for loc in self._locations
            if loc.has_coordinates
            and calculate_distance(origin.lat, origin.lon, loc.lat, loc.lon) <= km
        }
        if not towns:
            return self.unique_towns()
        return sorted(towns)

    def replace(self, locations: Iterable[Location]) -> int:
        """Атомарно подменяет содержимое каталога."""
        self._locations = tuple(locations)
        return len(self._locations)

    async def reload(self, path: Path | str) -> int:
        """
        Перечитывает CSV и подменяет каталог.

        Returns:
            Количество локаций после перезагрузки
        """
        locations = await load_locations(path)
        count = self.replace(locations)
        await log_info(f"Каталог перезагружен: {count} локаций", type_msg=TypeMsg.INFO)
        return count
