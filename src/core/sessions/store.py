# src/core/sessions/store.py
"""
Хранилище USSD-сессий в памяти процесса.
"""

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

from src.common.constants import TypeMsg
from src.common.logger import log_info
from src.core.sessions.models import Session


class SessionStore:
    """
    Хранилище сессий с семантикой get-or-create.

    - Запросы по одному ключу выполняются строго по очереди (asyncio.Lock на ключ),
      разные ключи не блокируют друг друга.
    - Сессия, не использовавшаяся дольше ttl_seconds, считается истёкшей.
      ttl_seconds=None или 0 - без истечения.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds or None
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, key: str) -> bool:
        return key in self._sessions

    def _is_expired(self, session: Session, now: float) -> bool:
        return self.ttl_seconds is not None and now - session.touched_at > self.ttl_seconds

    def get(self, key: str, phone: str = "") -> Session:
        """
        Возвращает сессию по ключу, создавая её при отсутствии.

        Между поиском и вставкой нет await, поэтому в рамках event loop
        операция атомарна.
        """
        now = self._clock()
        session = self._sessions.get(key)
        if session is None or self._is_expired(session, now):
            session = Session(id=key, phone=phone)
            self._sessions[key] = session
        elif phone and not session.phone:
            session.phone = phone
        session.touched_at = now
        return session

    def reset(self, key: str, phone: str = "") -> Session:
        """Заменяет сессию новой, в состоянии по умолчанию."""
        session = Session(id=key, phone=phone, touched_at=self._clock())
        self._sessions[key] = session
        return session

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def locked(self, key: str, phone: str = "") -> AsyncIterator[Session]:
        """
        Эксклюзивный доступ к сессии на время обработки запроса.

        Usage:
            async with store.locked(session_id, phone) as session:
                ...
        """
        async with self._lock_for(key):
            yield self.get(key, phone)

    async def purge_expired(self) -> int:
        """
        Удаляет истёкшие сессии.

        Сессии, с которыми прямо сейчас работает запрос, не трогаются.

        Returns:
            Количество удалённых сессий
        """
        if self.ttl_seconds is None:
            return 0

        now = self._clock()
        expired = [
            key for key, session in self._sessions.items()
            if self._is_expired(session, now)
            and not (key in self._locks and self._locks[key].locked())
        ]
        for key in expired:
            del self._sessions[key]
            self._locks.pop(key, None)

        if expired:
            await log_info(f"Удалено истёкших сессий: {len(expired)}", type_msg=TypeMsg.DEBUG)
        return len(expired)
