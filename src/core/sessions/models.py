# src/core/sessions/models.py
"""
Модели USSD-сессии.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from src.common.constants import DialogStep
from src.core.locations.models import Location


class SessionData(BaseModel):
    """
    Данные, накопленные диалогом.

    Поля заполняются строго по порядку шагов: pickup_town до pickup_zone и т.д.
    """
    pickup_town: Optional[str] = None
    pickup_zone: Optional[Location] = None
    candidate_towns: Optional[list[str]] = None
    drop_town: Optional[str] = None
    drop_zone: Optional[Location] = None
    fare: Optional[str] = None
    trip_id: Optional[str] = None


class Session(BaseModel):
    """Состояние диалога одного абонента."""

    id: str = Field(..., description="Ключ сессии (sessionId шлюза)")
    phone: str = Field("", description="Номер абонента")
    step: DialogStep = Field(DialogStep.MAIN, description="Текущий шаг")
    page: int = Field(1, ge=1, description="Страница текущего списка")
    data: SessionData = Field(default_factory=SessionData)

    # Учёт для режима накопленного пути ("1*2*0*3")
    tokens: list[str] = Field(default_factory=list, description="Уже применённые токены")
    last_reply: Optional[str] = Field(None, description="Последний ответ (для повторов шлюза)")

    touched_at: float = Field(0.0, description="Время последнего обращения (monotonic)")

    def reset(self) -> None:
        """Возвращает диалог в главное меню."""
        self.step = DialogStep.MAIN
        self.page = 1
        self.data = SessionData()
        self.tokens = []
        self.last_reply = None
