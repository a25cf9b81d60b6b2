# src/core/locations/loader.py
"""
Загрузка локаций из CSV.

Поддерживаются как короткий формат (town, location), так и расширенный
(zone_id, town, zone_name, zone_type, approx_distance_km, notes[, latitude, longitude]).
Заголовки сравниваются без учёта регистра и пробелов.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Optional

from src.common.constants import TypeMsg
from src.common.logger import log_error, log_info, log_warning
from src.core.locations.models import Location


# Синонимы колонок: поле модели -> допустимые заголовки (в порядке приоритета)
COLUMN_SYNONYMS: dict[str, tuple[str, ...]] = {
    "zone_id": ("zone_id", "id"),
    "town": ("town", "city", "place"),
    "name": ("zone_name", "location", "name"),
    "zone_type": ("zone_type",),
    "approx_distance_km": ("approx_distance_km",),
    "notes": ("notes",),
    "lat": ("latitude", "lat"),
    "lon": ("longitude", "lon", "lng"),
}


def _pick(row: dict[str, str], field: str) -> str:
    for header in COLUMN_SYNONYMS[field]:
        value = row.get(header)
        if value:
            return value
    return ""


def _to_float(value: str) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_row(raw: dict[str, Optional[str]]) -> Location:
    """
    Превращает строку CSV в Location.

    Args:
        raw: Строка из csv.DictReader (заголовки как в файле)

    Returns:
        Локация; координаты выставляются, только если распознаны обе
    """
    row = {
        (key or "").strip().lower(): (value or "").strip()
        for key, value in raw.items()
        if isinstance(value, str) or value is None
    }

    lat = _to_float(_pick(row, "lat"))
    lon = _to_float(_pick(row, "lon"))
    if lat is None or lon is None:
        lat = lon = None

    return Location(
        zone_id=_pick(row, "zone_id") or None,
        town=_pick(row, "town"),
        name=_pick(row, "name"),
        zone_type=_pick(row, "zone_type"),
        approx_distance_km=_to_float(_pick(row, "approx_distance_km")),
        notes=_pick(row, "notes"),
        lat=lat,
        lon=lon,
    )


async def load_locations(path: Path | str) -> list[Location]:
    """
    Читает CSV с локациями.

    Отсутствующий или нечитаемый файл не считается фатальной ошибкой:
    ошибка логируется и возвращается пустой список. Строки без города или
    без названия зоны пропускаются: в меню им нечего показать.

    Args:
        path: Путь к CSV

    Returns:
        Локации в порядке строк файла
    """
    csv_path = Path(path)
    if not csv_path.exists():
        await log_error(f"CSV файл не найден: {csv_path}")
        return []

    try:
        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            rows = [parse_row(raw) for raw in csv.DictReader(f)]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        await log_error(f"Ошибка загрузки CSV {csv_path}: {e}")
        return []

    locations = [loc for loc in rows if loc.town and loc.name]
    skipped = len(rows) - len(locations)
    if skipped:
        await log_warning(f"CSV {csv_path}: пропущено строк без города или названия: {skipped}")

    await log_info(f"CSV загружен: {len(locations)} локаций", type_msg=TypeMsg.INFO)
    return locations
