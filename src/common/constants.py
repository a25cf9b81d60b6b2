# src/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class DialogStep(str, Enum):
    """Шаги USSD диалога."""
    MAIN = "MAIN"
    PICK_TOWN = "PICK_TOWN"
    PICK_ZONE = "PICK_ZONE"
    DROP_TOWN = "DROP_TOWN"
    DROP_ZONE = "DROP_ZONE"
    CONFIRM = "CONFIRM"
    DONE = "DONE"

    def __str__(self) -> str:
        return self.value


class TripStatus(str, Enum):
    """Статусы поездки."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    PICKEDUP = "pickedup"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


# Статусы, которые водитель может выставить через /update
DRIVER_UPDATABLE_STATUSES: frozenset[TripStatus] = frozenset({
    TripStatus.PICKEDUP,
    TripStatus.COMPLETED,
    TripStatus.CANCELLED,
})

# Префиксы идентификаторов
TRIP_ID_PREFIX = "TR"
DRIVER_ID_PREFIX = "DR"

# Пункт "следующая страница" в любом списке
MORE_OPTION = "0"
