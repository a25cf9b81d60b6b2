# src/core/locations/models.py
"""
Модели данных локаций.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Точка подачи/высадки (зона внутри города)."""

    model_config = ConfigDict(frozen=True)

    zone_id: Optional[str] = Field(None, description="ID зоны из CSV")
    town: str = Field(..., description="Город")
    name: str = Field(..., description="Название зоны")
    zone_type: str = Field("", description="Тип зоны (mall, station, ...)")
    approx_distance_km: Optional[float] = Field(None, description="Примерное расстояние от центра")
    notes: str = Field("", description="Заметки")
    lat: Optional[float] = Field(None, description="Широта")
    lon: Optional[float] = Field(None, description="Долгота")

    @property
    def has_coordinates(self) -> bool:
        """Есть ли у зоны координаты."""
        return self.lat is not None and self.lon is not None

    @property
    def label(self) -> str:
        """Подпись пункта меню: "Имя (тип)"."""
        if self.zone_type:
            return f"{self.name} ({self.zone_type})"
        return self.name
