# tests/core/test_pricing_service.py
"""
Тесты для оценки стоимости поездки.
"""

from __future__ import annotations

import pytest

from src.core.locations import Location, LocationCatalog
from src.core.pricing import FareEstimator, FareQuote


class TestEstimate:
    """Тесты для тарифных коридоров."""

    @pytest.mark.parametrize(
        "distance_km, expected",
        [
            (0, "R25-R50"),
            (5, "R25-R50"),
            (5.01, "R50-R70"),
            (10, "R50-R70"),
            (15, "R70-R85"),
            (20, "R70-R85"),
            (30, "R85-R100"),
            (30.5, "R100+"),
            (31, "R100+"),
            (250, "R100+"),
        ],
    )
    def test_breakpoints(self, distance_km: float, expected: str) -> None:
        """Границы коридоров включаются сверху."""
        assert FareEstimator().estimate(distance_km) == expected

    def test_custom_tiers(self) -> None:
        estimator = FareEstimator(tiers=[(3, "cheap")], top_tier="expensive")

        assert estimator.estimate(3) == "cheap"
        assert estimator.estimate(3.1) == "expensive"


class TestQuote:
    """Тесты для оценки поездки между зонами."""

    def test_same_town(self, fares: FareEstimator, sample_locations: list[Location]) -> None:
        quote = fares.quote(sample_locations[0], sample_locations[1])

        assert quote == FareQuote(distance_km=5.0, fare="R25-R50")

    def test_table_pair(self, fares: FareEstimator, sample_locations: list[Location]) -> None:
        soweto, park_station = sample_locations[0], sample_locations[7]

        assert fares.quote(soweto, park_station).fare == "R70-R85"

    def test_far_pair(self, fares: FareEstimator, sample_locations: list[Location]) -> None:
        rivonia, soweto = sample_locations[11], sample_locations[0]

        assert fares.quote(rivonia, soweto).fare == "R100+"

    def test_missing_pair(self, fares: FareEstimator, sample_locations: list[Location]) -> None:
        """Пары нет в таблице - 10 км, второй коридор."""
        florida, sandton_city = sample_locations[13], sample_locations[10]

        assert fares.quote(florida, sandton_city) == FareQuote(distance_km=10.0, fare="R50-R70")

    def test_switches_to_coordinates_after_reload(self, fares: FareEstimator) -> None:
        """Провайдер выбирается по текущему содержимому каталога."""
        a = Location(town="Soweto", name="A", lat=0.0, lon=0.0)
        b = Location(town="Soweto", name="B", lat=0.0, lon=0.1)
        fares.catalog.replace([a, b])

        quote = fares.quote(a, b)

        assert quote.distance_km == pytest.approx(11.12, abs=0.01)
        assert quote.fare == "R70-R85"

    def test_without_catalog_uses_table(self) -> None:
        estimator = FareEstimator()
        a = Location(town="X", name="A", lat=0.0, lon=0.0)
        b = Location(town="Y", name="B", lat=0.0, lon=1.0)

        assert estimator.quote(a, b).distance_km == 10.0

    def test_from_settings(self) -> None:
        estimator = FareEstimator.from_settings(LocationCatalog())

        assert estimator.estimate(5) == "R25-R50"
        assert estimator.table.town_distance("Soweto", "Johannesburg") == 20.0
