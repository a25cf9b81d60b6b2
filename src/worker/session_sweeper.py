# src/worker/session_sweeper.py
"""
Воркер очистки истёкших USSD-сессий.
"""

from __future__ import annotations

from src.core.sessions.store import SessionStore
from src.worker.base import BaseWorker


class SessionSweeper(BaseWorker):
    """Периодически удаляет сессии, простаивающие дольше TTL хранилища."""

    def __init__(self, store: SessionStore, interval: float = 60.0) -> None:
        super().__init__(interval=interval)
        self.store = store
        self.purged_total = 0

    @property
    def name(self) -> str:
        return "session_sweeper"

    async def run_once(self) -> None:
        self.purged_total += await self.store.purge_expired()
