# src/core/drivers/__init__.py
"""
Домен водителей.
"""

from src.core.drivers.models import Driver
from src.core.drivers.registry import DriverRegistry

__all__ = [
    "Driver",
    "DriverRegistry",
]
