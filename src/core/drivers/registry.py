# src/core/drivers/registry.py
"""
Реестр водителей: регистрация, вход по телефону, список свободных поездок.
"""

from __future__ import annotations

import asyncio
from itertools import count
from typing import Optional

from src.common.constants import DRIVER_ID_PREFIX, TypeMsg
from src.common.exceptions import NotFoundError, ValidationError
from src.common.logger import log_info
from src.common.utils import normalize_phone
from src.core.drivers.models import Driver
from src.core.trips.models import Trip
from src.core.trips.registry import TripRegistry


class DriverRegistry:
    """
    Хранилище водителей в памяти процесса.

    Один телефон - один водитель: повторная регистрация отклоняется.
    Вход выполняется только по телефону, без пароля.
    """

    def __init__(self, trips: TripRegistry) -> None:
        self._trips = trips
        self._drivers: dict[str, Driver] = {}
        self._by_phone: dict[str, str] = {}
        self._counter = count(1)
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._drivers)

    def get(self, driver_id: str) -> Driver:
        """
        Возвращает водителя по ID.

        Raises:
            NotFoundError: Водителя нет
        """
        driver = self._drivers.get(driver_id)
        if driver is None:
            raise NotFoundError(f"Driver {driver_id} not found")
        return driver

    async def register(
        self,
        name: Optional[str],
        id_number: Optional[str],
        phone: Optional[str],
    ) -> Driver:
        """
        Регистрирует водителя.

        Raises:
            ValidationError: Пустое обязательное поле или телефон уже занят
        """
        fields = {"name": name, "idNumber": id_number, "phone": phone}
        missing = [key for key, value in fields.items() if not (value or "").strip()]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        normalized = normalize_phone(phone)
        if not normalized.lstrip("+"):
            raise ValidationError("Invalid phone number")

        async with self._lock:
            if normalized in self._by_phone:
                raise ValidationError(f"Driver with phone {normalized} is already registered")

            driver = Driver(
                id=f"{DRIVER_ID_PREFIX}-{next(self._counter)}",
                name=name.strip(),
                id_number=id_number.strip(),
                phone=normalized,
            )
            self._drivers[driver.id] = driver
            self._by_phone[normalized] = driver.id
            await log_info(f"Зарегистрирован водитель {driver.id}", type_msg=TypeMsg.INFO)
            return driver

    async def login(self, phone: Optional[str]) -> Driver:
        """
        Вход водителя по телефону.

        Raises:
            NotFoundError: Водитель с таким телефоном не зарегистрирован
        """
        normalized = normalize_phone(phone or "")
        driver_id = self._by_phone.get(normalized)
        if driver_id is None:
            raise NotFoundError("Driver not found")

        driver = self._drivers[driver_id]
        driver.logged_in = True
        await log_info(f"Водитель {driver.id} вошёл в систему", type_msg=TypeMsg.INFO)
        return driver

    def list_pending_trips(self) -> list[Trip]:
        """Поездки, ожидающие водителя."""
        return self._trips.list_pending()
