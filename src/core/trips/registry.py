# src/core/trips/registry.py
"""
Реестр поездок.
Создание, смена статуса и захват поездки водителем.
"""

from __future__ import annotations

import asyncio
from itertools import count
from typing import Optional

from src.common.constants import DRIVER_UPDATABLE_STATUSES, TRIP_ID_PREFIX, TripStatus, TypeMsg
from src.common.exceptions import AlreadyClaimedError, InvalidStatusError, NotFoundError
from src.common.logger import log_info
from src.core.trips.models import Trip, utcnow


class TripRegistry:
    """
    Хранилище поездок в памяти процесса.

    Все изменения выполняются под одной блокировкой реестра: счётчик ID
    не выдаёт повторов, а захват поездки - атомарная проверка и установка
    driver_id. Поездки не удаляются.
    """

    def __init__(self) -> None:
        self._trips: dict[str, Trip] = {}
        self._counter = count(1)
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._trips)

    def get(self, trip_id: str) -> Trip:
        """
        Возвращает поездку по ID.

        Raises:
            NotFoundError: Поездки нет
        """
        trip = self._trips.get(trip_id)
        if trip is None:
            raise NotFoundError(f"Trip {trip_id} not found")
        return trip

    async def create(
        self,
        phone: str,
        pickup: str,
        dropoff: str,
        pickup_town: Optional[str] = None,
        dropoff_town: Optional[str] = None,
        fare: Optional[str] = None,
    ) -> Trip:
        """Создаёт поездку в статусе pending с новым ID TR-<n>."""
        async with self._lock:
            trip = Trip(
                id=f"{TRIP_ID_PREFIX}-{next(self._counter)}",
                phone=phone,
                pickup=pickup,
                dropoff=dropoff,
                pickup_town=pickup_town,
                dropoff_town=dropoff_town,
                fare=fare,
            )
            self._trips[trip.id] = trip
            await log_info(
                f"Создана поездка {trip.id}: {pickup} -> {dropoff}",
                type_msg=TypeMsg.INFO,
                extra={"trip_id": trip.id, "fare": fare},
            )
            return trip

    async def claim(self, trip_id: str, driver_id: str) -> Trip:
        """
        Закрепляет поездку за водителем.

        Raises:
            NotFoundError: Поездки нет
            AlreadyClaimedError: Поездку уже принял водитель
        """
        async with self._lock:
            trip = self.get(trip_id)
            if trip.driver_id is not None:
                raise AlreadyClaimedError(f"Trip {trip_id} already accepted by another driver")

            trip.driver_id = driver_id
            trip.status = TripStatus.ACCEPTED
            trip.updated_at = utcnow()
            await log_info(
                f"Поездка {trip_id} принята водителем {driver_id}",
                type_msg=TypeMsg.INFO,
            )
            return trip

    async def set_status(self, trip_id: str, status: str) -> Trip:
        """
        Выставляет статус от имени водителя.

        Raises:
            InvalidStatusError: Статус не из {pickedup, completed, cancelled}
            NotFoundError: Поездки нет
        """
        try:
            new_status = TripStatus(status)
        except ValueError:
            raise InvalidStatusError(f"Invalid status: {status!r}") from None
        if new_status not in DRIVER_UPDATABLE_STATUSES:
            raise InvalidStatusError(f"Invalid status: {status!r}")

        async with self._lock:
            trip = self.get(trip_id)
            old_status = trip.status
            trip.status = new_status
            trip.updated_at = utcnow()
            await log_info(
                f"Поездка {trip_id}: {old_status} -> {new_status}",
                type_msg=TypeMsg.INFO,
            )
            return trip

    def list_pending(self) -> list[Trip]:
        """Поездки без водителя в статусе pending, в порядке создания."""
        return [trip for trip in self._trips.values() if trip.is_pending]

    def list_for_phone(self, phone: str, limit: Optional[int] = None) -> list[Trip]:
        """Поездки абонента, новые первыми."""
        trips = [trip for trip in reversed(self._trips.values()) if trip.phone == phone]
        return trips[:limit] if limit is not None else trips
