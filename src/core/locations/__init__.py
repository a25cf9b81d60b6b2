# src/core/locations/__init__.py
"""
Домен локаций.
Модель зоны, загрузка CSV и каталог с постраничными выборками.
"""

from src.core.locations.models import Location
from src.core.locations.catalog import LocationCatalog
from src.core.locations.loader import load_locations

__all__ = [
    "Location",
    "LocationCatalog",
    "load_locations",
]
