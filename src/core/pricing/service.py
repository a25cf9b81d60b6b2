# src/core/pricing/service.py
"""
Оценка стоимости поездки.

Вместо точной цены пассажир получает тарифный коридор, выбранный по
расстоянию между зонами подачи и высадки.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.geo.service import TableDistanceProvider, select_distance_provider
from src.core.locations.catalog import LocationCatalog
from src.core.locations.models import Location


DEFAULT_FARE_TIERS: tuple[tuple[float, str], ...] = (
    (5.0, "R25-R50"),
    (10.0, "R50-R70"),
    (20.0, "R70-R85"),
    (30.0, "R85-R100"),
)
DEFAULT_TOP_TIER = "R100+"


@dataclass(frozen=True)
class FareQuote:
    """Результат оценки стоимости."""
    distance_km: float
    fare: str


class FareEstimator:
    """
    Калькулятор тарифного коридора.

    Границы коридоров включаются сверху: ровно 5 км - ещё первый коридор.
    """

    def __init__(
        self,
        tiers: Sequence[tuple[float, str]] = DEFAULT_FARE_TIERS,
        top_tier: str = DEFAULT_TOP_TIER,
        table: Optional[TableDistanceProvider] = None,
        catalog: Optional[LocationCatalog] = None,
    ) -> None:
        """
        Args:
            tiers: Пары (верхняя граница км, метка) по возрастанию
            top_tier: Метка для расстояний больше последней границы
            table: Табличный провайдер расстояний
            catalog: Каталог (по нему выбирается гео-провайдер)
        """
        self.tiers = tuple((float(upper), label) for upper, label in tiers)
        self.top_tier = top_tier
        self.table = table or TableDistanceProvider()
        self.catalog = catalog

    @classmethod
    def from_settings(cls, catalog: LocationCatalog) -> "FareEstimator":
        """Создаёт калькулятор с тарифами из конфига."""
        from src.config import settings

        fares = settings.fares
        table = TableDistanceProvider(
            table=fares.TOWN_DISTANCES,
            same_town_km=fares.SAME_TOWN_DISTANCE_KM,
            default_km=fares.DEFAULT_DISTANCE_KM,
        )
        return cls(
            tiers=fares.FARE_TIERS,
            top_tier=fares.TOP_TIER_LABEL,
            table=table,
            catalog=catalog,
        )

    def estimate(self, distance_km: float) -> str:
        """Возвращает коридор стоимости для расстояния."""
        for upper, label in self.tiers:
            if distance_km <= upper:
                return label
        return self.top_tier

    def distance(self, pickup: Location, drop: Location) -> float:
        """Расстояние между зонами (по координатам или по таблице городов)."""
        if self.catalog is None:
            return self.table.distance(pickup, drop)
        provider = select_distance_provider(self.catalog, self.table)
        return provider.distance(pickup, drop)

    def quote(self, pickup: Location, drop: Location) -> FareQuote:
        """Оценивает поездку между двумя зонами."""
        distance_km = self.distance(pickup, drop)
        return FareQuote(distance_km=round(distance_km, 2), fare=self.estimate(distance_km))

