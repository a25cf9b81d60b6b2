# src/services/state.py
"""
Состояние процесса: каталог, реестры, сессии и собранный из них USSD-сервис.
Всё хранится в памяти и живёт в app.state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.config.loader import Settings
from src.core.dialog import DialogEngine
from src.core.drivers import DriverRegistry
from src.core.locations import LocationCatalog
from src.core.pricing import FareEstimator
from src.core.sessions import SessionStore
from src.core.trips import TripRegistry
from src.services.ussd_service.service import UssdService
from src.worker import SessionSweeper


@dataclass
class AppState:
    catalog: LocationCatalog
    csv_path: Path
    trips: TripRegistry
    drivers: DriverRegistry
    sessions: SessionStore
    ussd: UssdService
    sweeper: SessionSweeper


def build_state(settings: Settings) -> AppState:
    """Собирает компоненты по настройкам. Каталог пуст до вызова reload()."""
    catalog = LocationCatalog()
    trips = TripRegistry()
    drivers = DriverRegistry(trips)
    sessions = SessionStore(ttl_seconds=settings.sessions.SESSION_TTL_SECONDS)

    engine = DialogEngine.from_settings(
        catalog=catalog,
        fares=FareEstimator.from_settings(catalog),
        trips=trips,
    )

    return AppState(
        catalog=catalog,
        csv_path=settings.catalog.path,
        trips=trips,
        drivers=drivers,
        sessions=sessions,
        ussd=UssdService(sessions, engine, input_mode=settings.ussd.INPUT_MODE),
        sweeper=SessionSweeper(sessions, interval=settings.sessions.SESSION_SWEEP_INTERVAL_SECONDS),
    )
