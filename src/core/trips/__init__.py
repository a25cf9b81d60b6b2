# src/core/trips/__init__.py
"""
Домен поездок.
"""

from src.core.trips.models import Trip
from src.core.trips.registry import TripRegistry

__all__ = [
    "Trip",
    "TripRegistry",
]
