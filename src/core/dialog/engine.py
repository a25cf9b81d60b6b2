# src/core/dialog/engine.py
"""
Конечный автомат USSD-диалога.

Один вызов handle() - один ответ шлюзу. Состояние (шаг, страница, выбранные
города и зоны) живёт в Session и сохраняется между запросами.

    MAIN -> PICK_TOWN -> PICK_ZONE -> DROP_TOWN -> DROP_ZONE -> CONFIRM -> DONE

Ошибка выбора (не число, номер вне списка) завершает диалог и не меняет сессию.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from src.common.constants import MORE_OPTION, DialogStep, TypeMsg
from src.common.exceptions import OutOfRangeError, ValidationError
from src.common.logger import log_info, log_warning
from src.core.dialog.menus import build_menu, parse_selection, resolve_index
from src.core.locations.catalog import LocationCatalog
from src.core.locations.models import Location
from src.core.pricing.service import FareEstimator
from src.core.sessions.models import Session
from src.core.trips.registry import TripRegistry


CONTINUE_PREFIX = "CON"
END_PREFIX = "END"

INVALID_SELECTION = "Invalid selection"
INVALID_OPTION = "Invalid option"


@dataclass(frozen=True)
class DialogReply:
    """Ответ шлюзу: текст и признак завершения диалога."""
    text: str
    terminal: bool = False

    @classmethod
    def con(cls, text: str) -> "DialogReply":
        return cls(text=text, terminal=False)

    @classmethod
    def end(cls, text: str) -> "DialogReply":
        return cls(text=text, terminal=True)

    @classmethod
    def parse(cls, rendered: str) -> "DialogReply":
        """Восстанавливает ответ из строки "CON ..."/"END ..."."""
        prefix, _, text = rendered.partition(" ")
        return cls(text=text, terminal=prefix == END_PREFIX)

    def render(self) -> str:
        prefix = END_PREFIX if self.terminal else CONTINUE_PREFIX
        return f"{prefix} {self.text}"


class DialogEngine:
    """
    Обработчик шагов диалога.

    Побочные эффекты: изменение сессии и, при подтверждении, ровно одна
    поездка в TripRegistry.
    """

    def __init__(
        self,
        catalog: LocationCatalog,
        fares: FareEstimator,
        trips: TripRegistry,
        page_size: int = 6,
        max_distance_km: float = 30.0,
        service_name: str = "QuickRide",
        help_line: str = "0800-000-000",
        my_rides_limit: int = 3,
    ) -> None:
        self.catalog = catalog
        self.fares = fares
        self.trips = trips
        self.page_size = page_size
        self.max_distance_km = max_distance_km
        self.service_name = service_name
        self.help_line = help_line
        self.my_rides_limit = my_rides_limit

        self._handlers: dict[DialogStep, Callable[[Session, str], Awaitable[DialogReply]]] = {
            DialogStep.MAIN: self._on_main,
            DialogStep.PICK_TOWN: self._on_pick_town,
            DialogStep.PICK_ZONE: self._on_pick_zone,
            DialogStep.DROP_TOWN: self._on_drop_town,
            DialogStep.DROP_ZONE: self._on_drop_zone,
            DialogStep.CONFIRM: self._on_confirm,
        }

    @classmethod
    def from_settings(
        cls,
        catalog: LocationCatalog,
        fares: FareEstimator,
        trips: TripRegistry,
    ) -> "DialogEngine":
        """Создаёт движок с параметрами из конфига."""
        from src.config import settings

        ussd = settings.ussd
        return cls(
            catalog=catalog,
            fares=fares,
            trips=trips,
            page_size=ussd.PAGE_SIZE,
            max_distance_km=ussd.MAX_DISTANCE_KM,
            service_name=ussd.SERVICE_NAME,
            help_line=ussd.HELP_LINE,
            my_rides_limit=ussd.MY_RIDES_LIMIT,
        )

    async def handle(self, session: Session, raw_text: str) -> DialogReply:
        """
        Обрабатывает один ввод абонента.

        Args:
            session: Сессия абонента (изменяется на месте)
            raw_text: Один токен ввода ("" при первом обращении)

        Returns:
            Ответ для шлюза
        """
        text = (raw_text or "").strip()

        # Завершённый диалог начинается заново с главного меню
        if session.step == DialogStep.DONE:
            session.reset()

        step = session.step
        try:
            reply = await self._handlers[step](session, text)
        except (ValidationError, OutOfRangeError) as e:
            await log_warning(
                f"Неверный выбор на шаге {step}: {e}",
                extra={"step": str(step), "page": session.page},
            )
            return DialogReply.end(INVALID_SELECTION)

        await log_info(
            f"Шаг {step} -> {session.step}",
            type_msg=TypeMsg.DEBUG,
            extra={"input": text, "page": session.page},
        )
        return reply

    # =========================================================================
    # РЕНДЕРИНГ
    # =========================================================================

    def _menu(self, title: str, labels: Sequence[str], page: int) -> DialogReply:
        return DialogReply.con(build_menu(labels, page, self.page_size, title))

    def _root_menu(self) -> DialogReply:
        return DialogReply.con(
            f"Welcome to {self.service_name}\n"
            "1. Book Taxi\n"
            "2. My Rides\n"
            "3. Help"
        )

    def _pick_town_menu(self, session: Session) -> DialogReply:
        return self._menu("Select PICK-UP town:", self.catalog.unique_towns(), session.page)

    def _pick_zone_menu(self, session: Session) -> DialogReply:
        town = session.data.pickup_town
        zones = self.catalog.zones_for_town(town)
        return self._menu(f"Select PICK-UP zone in {town}:", [z.label for z in zones], session.page)

    def _drop_town_menu(self, session: Session) -> DialogReply:
        return self._menu("Select DROP-OFF town:", self._candidate_towns(session), session.page)

    def _drop_zone_menu(self, session: Session) -> DialogReply:
        town = session.data.drop_town
        zones = self.catalog.zones_for_town(town)
        return self._menu(f"Select DROP-OFF zone in {town}:", [z.label for z in zones], session.page)

    def _confirm_menu(self, session: Session) -> DialogReply:
        data = session.data
        return DialogReply.con(
            "Confirm Ride:\n"
            f"From: {data.pickup_zone.name} ({data.pickup_town})\n"
            f"To: {data.drop_zone.name} ({data.drop_town})\n"
            f"Fare: {data.fare}\n"
            "1. Confirm\n"
            "2. Cancel"
        )

    def _my_rides(self, session: Session) -> DialogReply:
        trips = self.trips.list_for_phone(session.phone, self.my_rides_limit) if session.phone else []
        if not trips:
            return DialogReply.end("You have no rides yet.")
        lines = [f"{t.id}: {t.pickup} -> {t.dropoff} ({t.status})" for t in trips]
        return DialogReply.end("Your rides:\n" + "\n".join(lines))

    # =========================================================================
    # ВЫБОР ИЗ СПИСКА
    # =========================================================================

    def _candidate_towns(self, session: Session) -> list[str]:
        return session.data.candidate_towns or self.catalog.unique_towns()

    def _choose(self, session: Session, text: str, items: Sequence):
        """
        Возвращает выбранный элемент или None для "0. More".

        Сессия меняется только при "0" (номер страницы); ошибка выбора
        выбрасывается до любых изменений.
        """
        if text == MORE_OPTION:
            session.page += 1
            return None
        selection = parse_selection(text)
        return items[resolve_index(session.page, self.page_size, selection, len(items))]

    def _advance(self, session: Session, step: DialogStep) -> None:
        session.step = step
        session.page = 1

    # =========================================================================
    # ОБРАБОТЧИКИ ШАГОВ
    # =========================================================================

    async def _on_main(self, session: Session, text: str) -> DialogReply:
        if not text:
            return self._root_menu()
        if text == "1":
            self._advance(session, DialogStep.PICK_TOWN)
            return self._pick_town_menu(session)
        if text == "2":
            return self._my_rides(session)
        if text == "3":
            return DialogReply.end(f"For help call {self.help_line}")
        return DialogReply.end(INVALID_OPTION)

    async def _on_pick_town(self, session: Session, text: str) -> DialogReply:
        town = self._choose(session, text, self.catalog.unique_towns())
        if town is None:
            return self._pick_town_menu(session)

        session.data.pickup_town = town
        self._advance(session, DialogStep.PICK_ZONE)
        return self._pick_zone_menu(session)

    async def _on_pick_zone(self, session: Session, text: str) -> DialogReply:
        zone: Location | None = self._choose(
            session, text, self.catalog.zones_for_town(session.data.pickup_town)
        )
        if zone is None:
            return self._pick_zone_menu(session)

        session.data.pickup_zone = zone
        session.data.candidate_towns = self.catalog.within_radius(zone, self.max_distance_km)
        self._advance(session, DialogStep.DROP_TOWN)
        return self._drop_town_menu(session)

    async def _on_drop_town(self, session: Session, text: str) -> DialogReply:
        town = self._choose(session, text, self._candidate_towns(session))
        if town is None:
            return self._drop_town_menu(session)

        session.data.drop_town = town
        self._advance(session, DialogStep.DROP_ZONE)
        return self._drop_zone_menu(session)

    async def _on_drop_zone(self, session: Session, text: str) -> DialogReply:
        zone: Location | None = self._choose(
            session, text, self.catalog.zones_for_town(session.data.drop_town)
        )
        if zone is None:
            return self._drop_zone_menu(session)

        session.data.drop_zone = zone
        session.data.fare = self.fares.quote(session.data.pickup_zone, zone).fare
        self._advance(session, DialogStep.CONFIRM)
        return self._confirm_menu(session)

    async def _on_confirm(self, session: Session, text: str) -> DialogReply:
        if text != "1":
            session.reset()
            return DialogReply.end("Ride cancelled.")

        data = session.data
        trip = await self.trips.create(
            phone=session.phone,
            pickup=data.pickup_zone.name,
            dropoff=data.drop_zone.name,
            pickup_town=data.pickup_town,
            dropoff_town=data.drop_town,
            fare=data.fare,
        )
        data.trip_id = trip.id
        session.step = DialogStep.DONE
        return DialogReply.end(
            f"Your ride request has been received. Trip ID: {trip.id}. "
            "We will notify drivers nearby."
        )
