# src/common/exceptions.py
"""
Доменные исключения.
Каждое исключение знает HTTP-статус, с которым оно уходит клиенту.
"""

from __future__ import annotations


class QuickRideError(Exception):
    """Базовое доменное исключение."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QuickRideError):
    """Отсутствует или некорректно обязательное поле."""


class NotFoundError(QuickRideError):
    """Запись (поездка, водитель) не найдена."""

    status_code = 404


class OutOfRangeError(QuickRideError):
    """Выбранный номер пункта вне границ списка."""


class AlreadyClaimedError(QuickRideError):
    """Поездку уже принял другой водитель."""


class InvalidStatusError(QuickRideError):
    """Недопустимый статус поездки."""
