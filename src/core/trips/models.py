# src/core/trips/models.py
"""
Модель поездки.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.common.constants import TripStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Trip(BaseModel):
    """Поездка, созданная подтверждением USSD-диалога."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="ID вида TR-<n>")
    phone: str = Field(..., description="Номер пассажира")
    pickup: str = Field(..., description="Зона подачи")
    dropoff: str = Field(..., description="Зона высадки")
    pickup_town: Optional[str] = Field(None, description="Город подачи")
    dropoff_town: Optional[str] = Field(None, description="Город высадки")
    fare: Optional[str] = Field(None, description="Тарифный коридор")
    status: TripStatus = Field(TripStatus.PENDING, description="Статус")
    driver_id: Optional[str] = Field(None, description="ID водителя, принявшего поездку")

    created_at: datetime = Field(default_factory=utcnow, description="Время создания")
    updated_at: datetime = Field(default_factory=utcnow, description="Время изменения")

    @property
    def is_pending(self) -> bool:
        """Ждёт ли поездка водителя."""
        return self.status == TripStatus.PENDING and self.driver_id is None
