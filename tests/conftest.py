# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from src.core.dialog import DialogEngine
from src.core.drivers import DriverRegistry
from src.core.geo import TableDistanceProvider
from src.core.locations import Location, LocationCatalog
from src.core.pricing import FareEstimator
from src.core.sessions import SessionStore
from src.core.trips import TripRegistry


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def config_path(project_root: Path) -> Path:
    """Путь к файлу конфигурации."""
    return project_root / "config" / "config.json"


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Мок конфигурации для тестов."""
    return {
        "_comment_system": "test",
        "PROJECT_NAME": "quickride_test",
        "VERSION": "1.0.0-test",
        "DEBUG": True,
        "ENVIRONMENT": "test",
        "HOST": "127.0.0.1",
        "PORT": 3100,
        "LOG_LEVEL": "DEBUG",
        "LOG_FORMAT": "json",
        "LOG_TO_FILE": False,
        "LOG_FILE_PATH": "logs/test.log",
        "LOG_MAX_BYTES": 1024,
        "SERVICE_NAME": "QuickRide Test",
        "PAGE_SIZE": 4,
        "MAX_DISTANCE_KM": 25,
        "INPUT_MODE": "path",
        "HELP_LINE": "0800-111-222",
        "MY_RIDES_LIMIT": 2,
        "CSV_PATH": "data/locations.csv",
        "FARE_TIERS": [[5, "R25-R50"], [10, "R50-R70"], [20, "R70-R85"], [30, "R85-R100"]],
        "TOP_TIER_LABEL": "R100+",
        "SAME_TOWN_DISTANCE_KM": 5,
        "DEFAULT_DISTANCE_KM": 10,
        "TOWN_DISTANCES": [["Soweto", "Johannesburg", 20]],
        "SESSION_TTL_SECONDS": 300,
        "SESSION_SWEEP_INTERVAL_SECONDS": 30,
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, mock_config: dict[str, Any]) -> Path:
    """Создаёт временный файл конфигурации."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(mock_config, ensure_ascii=False, indent=2))
    return config_file


# =============================================================================
# ФИКСТУРЫ ДАННЫХ
# =============================================================================

def make_zone(town: str, name: str, zone_type: str = "", **kwargs: Any) -> Location:
    return Location(town=town, name=name, zone_type=zone_type, **kwargs)


@pytest.fixture
def sample_locations() -> list[Location]:
    """Каталог как в data/locations.csv: в Soweto 7 зон (две страницы по 6)."""
    return [
        make_zone("Soweto", "Maponya Mall", "mall", zone_id="Z001"),
        make_zone("Soweto", "Bara Taxi Rank", "taxi rank", zone_id="Z002"),
        make_zone("Soweto", "Orlando East", "residential", zone_id="Z003"),
        make_zone("Soweto", "Protea Glen", "residential", zone_id="Z004"),
        make_zone("Soweto", "Jabulani", "residential", zone_id="Z005"),
        make_zone("Soweto", "Dobsonville", "residential", zone_id="Z006"),
        make_zone("Soweto", "Meadowlands", "residential", zone_id="Z007"),
        make_zone("Johannesburg", "Park Station", "station", zone_id="Z008"),
        make_zone("Johannesburg", "Braamfontein", "business", zone_id="Z009"),
        make_zone("Johannesburg", "Hillbrow", "residential", zone_id="Z010"),
        make_zone("Sandton", "Sandton City", "mall", zone_id="Z011"),
        make_zone("Sandton", "Rivonia", "business", zone_id="Z012"),
        make_zone("Roodepoort", "Clearwater Mall", "mall", zone_id="Z013"),
        make_zone("Roodepoort", "Florida", "residential", zone_id="Z014"),
    ]


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """CSV с нестандартными заголовками и координатами."""
    csv_file = tmp_path / "locations.csv"
    csv_file.write_text(
        " ID ,City,Location,Zone_Type,approx_distance_km,Notes,Lat,Lng\n"
        "A1, Soweto ,Maponya Mall,mall,0,,-26.2607,27.9045\n"
        "A2,Soweto,Bara Taxi Rank,taxi rank,3.5,Near hospital,-26.2607,27.9420\n"
        "B1,Johannesburg,Park Station,station,,,-26.1952,28.0422\n"
        "C1,Pretoria,Church Square,,abc,,-25.7461,not-a-number\n",
        encoding="utf-8",
    )
    return csv_file


# =============================================================================
# ФИКСТУРЫ КОМПОНЕНТОВ
# =============================================================================

@pytest.fixture
def catalog(sample_locations: list[Location]) -> LocationCatalog:
    return LocationCatalog(sample_locations)


@pytest.fixture
def table_provider() -> TableDistanceProvider:
    return TableDistanceProvider(
        table=[
            ("Soweto", "Johannesburg", 20),
            ("Soweto", "Roodepoort", 15),
            ("Johannesburg", "Sandton", 16),
            ("Sandton", "Soweto", 32),
        ],
    )


@pytest.fixture
def fares(catalog: LocationCatalog, table_provider: TableDistanceProvider) -> FareEstimator:
    return FareEstimator(table=table_provider, catalog=catalog)


@pytest.fixture
def trips() -> TripRegistry:
    return TripRegistry()


@pytest.fixture
def drivers(trips: TripRegistry) -> DriverRegistry:
    return DriverRegistry(trips)


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def engine(catalog: LocationCatalog, fares: FareEstimator, trips: TripRegistry) -> DialogEngine:
    return DialogEngine(
        catalog=catalog,
        fares=fares,
        trips=trips,
        page_size=6,
        max_distance_km=30.0,
        service_name="QuickRide",
        help_line="0800-000-000",
        my_rides_limit=3,
    )
