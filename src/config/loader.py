# src/config/loader.py
"""
Загрузчик конфигурации проекта.
Единственный источник истины - config/config.json.
Отдельные значения переопределяются из переменных окружения.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУТЕЙ
# =============================================================================

def get_project_root() -> Path:
    """Возвращает корневую директорию проекта."""
    return Path(__file__).parent.parent.parent


def get_config_path() -> Path:
    """Возвращает путь к файлу конфигурации."""
    return get_project_root() / "config" / "config.json"


def load_config_json() -> dict[str, Any]:
    """Загружает config.json и возвращает словарь."""
    config_path = get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Файл конфигурации не найден: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


# =============================================================================
# PYDANTIC МОДЕЛИ КОНФИГУРАЦИИ
# =============================================================================

class SystemSettings(BaseModel):
    """Системные настройки."""
    PROJECT_NAME: str = "quickride"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"


class ServerSettings(BaseModel):
    """Настройки HTTP сервера."""
    HOST: str = "0.0.0.0"
    PORT: int = 3000


class LoggingSettings(BaseModel):
    """Настройки логирования."""
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "colored"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/app.log"
    LOG_MAX_BYTES: int = 10485760

    @field_validator("LOG_FORMAT")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Допускает только colored или json."""
        if v not in ("colored", "json"):
            raise ValueError(f"LOG_FORMAT должен быть colored или json, получено {v!r}")
        return v


class UssdSettings(BaseModel):
    """Настройки USSD диалога."""
    SERVICE_NAME: str = "QuickRide"
    PAGE_SIZE: int = Field(default=6, ge=1)
    MAX_DISTANCE_KM: float = Field(default=30.0, gt=0)
    INPUT_MODE: str = "step"
    HELP_LINE: str = "0800-000-000"
    MY_RIDES_LIMIT: int = Field(default=3, ge=1)

    @field_validator("INPUT_MODE")
    @classmethod
    def check_input_mode(cls, v: str) -> str:
        """step - одна цифра за запрос, path - накопленный путь через '*'."""
        if v not in ("step", "path"):
            raise ValueError(f"INPUT_MODE должен быть step или path, получено {v!r}")
        return v


class CatalogSettings(BaseModel):
    """Настройки каталога локаций."""
    CSV_PATH: str = "data/locations.csv"

    @property
    def path(self) -> Path:
        """Абсолютный путь к CSV (относительные пути - от корня проекта)."""
        csv_path = Path(self.CSV_PATH)
        if csv_path.is_absolute():
            return csv_path
        return get_project_root() / csv_path


class FareSettings(BaseModel):
    """Настройки тарифов (тарифные коридоры по расстоянию)."""
    FARE_TIERS: list[tuple[float, str]] = Field(
        default_factory=lambda: [
            (5.0, "R25-R50"),
            (10.0, "R50-R70"),
            (20.0, "R70-R85"),
            (30.0, "R85-R100"),
        ]
    )
    TOP_TIER_LABEL: str = "R100+"
    SAME_TOWN_DISTANCE_KM: float = 5.0
    DEFAULT_DISTANCE_KM: float = 10.0
    TOWN_DISTANCES: list[tuple[str, str, float]] = Field(default_factory=list)

    @field_validator("FARE_TIERS")
    @classmethod
    def check_tiers_sorted(cls, v: list[tuple[float, str]]) -> list[tuple[float, str]]:
        """Границы коридоров должны строго возрастать."""
        bounds = [upper for upper, _ in v]
        if bounds != sorted(set(bounds)):
            raise ValueError("FARE_TIERS должны идти по возрастанию границ без повторов")
        return v


class SessionSettings(BaseModel):
    """Настройки хранилища сессий."""
    SESSION_TTL_SECONDS: float = Field(default=0.0, ge=0)
    SESSION_SWEEP_INTERVAL_SECONDS: float = Field(default=60.0, gt=0)


# =============================================================================
# ГЛАВНЫЙ КЛАСС НАСТРОЕК
# =============================================================================

class Settings(BaseSettings):
    """
    Главный класс настроек приложения.
    Агрегирует все секции конфигурации.
    """
    system: SystemSettings = Field(default_factory=SystemSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    ussd: UssdSettings = Field(default_factory=UssdSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    fares: FareSettings = Field(default_factory=FareSettings)
    sessions: SessionSettings = Field(default_factory=SessionSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def from_config_json(cls) -> "Settings":
        """
        Создаёт объект Settings из config.json.
        Порт, пути и режимы переопределяются из переменных окружения.
        """
        config_data = load_config_json()

        # Фильтруем комментарии (ключи, начинающиеся с _comment_)
        filtered_data = {k: v for k, v in config_data.items() if not k.startswith("_comment_")}

        fare_defaults = FareSettings()

        return cls(
            system=SystemSettings(
                PROJECT_NAME=filtered_data.get("PROJECT_NAME", "quickride"),
                VERSION=filtered_data.get("VERSION", "1.0.0"),
                DEBUG=filtered_data.get("DEBUG", False),
                ENVIRONMENT=os.getenv("ENVIRONMENT", filtered_data.get("ENVIRONMENT", "development")),
            ),
            server=ServerSettings(
                HOST=os.getenv("HOST", filtered_data.get("HOST", "0.0.0.0")),
                PORT=int(os.getenv("PORT", filtered_data.get("PORT", 3000))),
            ),
            logging=LoggingSettings(
                LOG_LEVEL=os.getenv("LOG_LEVEL", filtered_data.get("LOG_LEVEL", "INFO")),
                LOG_FORMAT=os.getenv("LOG_FORMAT", filtered_data.get("LOG_FORMAT", "colored")),
                LOG_TO_FILE=filtered_data.get("LOG_TO_FILE", False),
                LOG_FILE_PATH=filtered_data.get("LOG_FILE_PATH", "logs/app.log"),
                LOG_MAX_BYTES=filtered_data.get("LOG_MAX_BYTES", 10485760),
            ),
            ussd=UssdSettings(
                SERVICE_NAME=filtered_data.get("SERVICE_NAME", "QuickRide"),
                PAGE_SIZE=filtered_data.get("PAGE_SIZE", 6),
                MAX_DISTANCE_KM=filtered_data.get("MAX_DISTANCE_KM", 30.0),
                INPUT_MODE=os.getenv("USSD_INPUT_MODE", filtered_data.get("INPUT_MODE", "step")),
                HELP_LINE=filtered_data.get("HELP_LINE", "0800-000-000"),
                MY_RIDES_LIMIT=filtered_data.get("MY_RIDES_LIMIT", 3),
            ),
            catalog=CatalogSettings(
                CSV_PATH=os.getenv("CSV_PATH", filtered_data.get("CSV_PATH", "data/locations.csv")),
            ),
            fares=FareSettings(
                FARE_TIERS=filtered_data.get("FARE_TIERS", fare_defaults.FARE_TIERS),
                TOP_TIER_LABEL=filtered_data.get("TOP_TIER_LABEL", "R100+"),
                SAME_TOWN_DISTANCE_KM=filtered_data.get("SAME_TOWN_DISTANCE_KM", 5.0),
                DEFAULT_DISTANCE_KM=filtered_data.get("DEFAULT_DISTANCE_KM", 10.0),
                TOWN_DISTANCES=filtered_data.get("TOWN_DISTANCES", []),
            ),
            sessions=SessionSettings(
                SESSION_TTL_SECONDS=float(
                    os.getenv("SESSION_TTL_SECONDS", filtered_data.get("SESSION_TTL_SECONDS", 0.0))
                ),
                SESSION_SWEEP_INTERVAL_SECONDS=filtered_data.get("SESSION_SWEEP_INTERVAL_SECONDS", 60.0),
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Возвращает синглтон настроек приложения.
    Использует кэширование для производительности.
    """
    from dotenv import load_dotenv

    # Загружаем .env файл
    env_path = get_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Settings.from_config_json()


# Экспорт синглтона для удобного импорта
settings = get_settings()
