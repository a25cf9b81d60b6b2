# src/core/geo/service.py
"""
Расчёт расстояний между зонами.

Два взаимозаменяемых провайдера:
- TableDistanceProvider: статическая симметричная таблица пар городов
- GeoDistanceProvider: Haversine по координатам зон (с откатом на таблицу)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from src.core.locations.catalog import LocationCatalog
    from src.core.locations.models import Location


EARTH_RADIUS_KM = 6371.0


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Вычисляет расстояние между двумя точками (в км) по формуле Haversine.
    """
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(dlon / 2) ** 2)

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


class DistanceProvider(Protocol):
    """Источник расстояния между двумя зонами."""

    def distance(self, pickup: Location, drop: Location) -> float:
        ...


class TableDistanceProvider:
    """Расстояние по таблице пар городов."""

    def __init__(
        self,
        table: Iterable[tuple[str, str, float]] = (),
        same_town_km: float = 5.0,
        default_km: float = 10.0,
    ) -> None:
        """
        Args:
            table: Тройки (город A, город B, км); порядок городов не важен
            same_town_km: Расстояние внутри одного города
            default_km: Расстояние для пары, которой нет в таблице
        """
        self.same_town_km = same_town_km
        self.default_km = default_km
        self._table: dict[frozenset[str], float] = {}
        for town_a, town_b, km in table:
            self._table[frozenset((town_a.lower(), town_b.lower()))] = float(km)

    def town_distance(self, town_a: str, town_b: str) -> float:
        """Расстояние между городами (симметрично, без учёта регистра)."""
        a, b = town_a.lower(), town_b.lower()
        if a == b:
            return self.same_town_km
        return self._table.get(frozenset((a, b)), self.default_km)

    def distance(self, pickup: Location, drop: Location) -> float:
        return self.town_distance(pickup.town, drop.town)


class GeoDistanceProvider:
    """Расстояние по координатам; без координат - по таблице."""

    def __init__(self, fallback: TableDistanceProvider) -> None:
        self.fallback = fallback

    def distance(self, pickup: Location, drop: Location) -> float:
        if pickup.has_coordinates and drop.has_coordinates:
            return calculate_distance(pickup.lat, pickup.lon, drop.lat, drop.lon)
        return self.fallback.distance(pickup, drop)


def select_distance_provider(
    catalog: "LocationCatalog",
    table_provider: TableDistanceProvider,
) -> DistanceProvider:
    """Выбирает гео-провайдер, если в каталоге есть координаты."""
    if catalog.has_coordinates:
        return GeoDistanceProvider(table_provider)
    return table_provider
