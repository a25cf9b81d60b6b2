# src/core/sessions/__init__.py
"""
USSD-сессии: модель состояния диалога и хранилище.
"""

from src.core.sessions.models import Session, SessionData
from src.core.sessions.store import SessionStore

__all__ = [
    "Session",
    "SessionData",
    "SessionStore",
]
