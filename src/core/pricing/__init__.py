# src/core/pricing/__init__.py
"""
Тарифы: оценка коридора стоимости по расстоянию.
"""

from src.core.pricing.service import FareEstimator, FareQuote

__all__ = [
    "FareEstimator",
    "FareQuote",
]
