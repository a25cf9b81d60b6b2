# src/core/geo/__init__.py
"""
Geo-сервис.
Расстояние по формуле Haversine и провайдеры расстояний между зонами.
"""

from src.core.geo.service import (
    DistanceProvider,
    GeoDistanceProvider,
    TableDistanceProvider,
    calculate_distance,
    select_distance_provider,
)

__all__ = [
    "DistanceProvider",
    "GeoDistanceProvider",
    "TableDistanceProvider",
    "calculate_distance",
    "select_distance_provider",
]
