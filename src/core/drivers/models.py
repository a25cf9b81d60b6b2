# src/core/drivers/models.py
"""
Модель водителя.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.core.trips.models import utcnow


class Driver(BaseModel):
    """Зарегистрированный водитель."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="ID вида DR-<n>")
    name: str = Field(..., description="Имя")
    id_number: str = Field(..., description="Номер документа")
    phone: str = Field(..., description="Телефон (нормализованный)")
    logged_in: bool = Field(False, description="Выполнен ли вход")
    created_at: datetime = Field(default_factory=utcnow, description="Время регистрации")
