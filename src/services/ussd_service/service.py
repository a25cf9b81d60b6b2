# src/services/ussd_service/service.py
"""
Сервис обработки USSD-колбэков шлюза.
"""

from __future__ import annotations

from typing import Optional

from src.common.constants import TypeMsg
from src.common.logger import log_info, set_session_id
from src.common.utils import normalize_phone
from src.core.dialog import DialogEngine, DialogReply, PathReplayAdapter
from src.core.sessions import SessionStore


ANONYMOUS_KEY = "anon"

INPUT_MODE_STEP = "step"
INPUT_MODE_PATH = "path"


class UssdService:
    """
    Связывает запрос шлюза с сессией и движком диалога.

    Запрос целиком выполняется под блокировкой своей сессии: два колбэка
    одного абонента не могут перемешать шаги диалога.
    """

    def __init__(
        self,
        store: SessionStore,
        engine: DialogEngine,
        input_mode: str = INPUT_MODE_STEP,
    ) -> None:
        self.store = store
        self.engine = engine
        self.input_mode = input_mode
        self.replay = PathReplayAdapter(engine)

    @staticmethod
    def session_key(session_id: Optional[str], phone: Optional[str]) -> str:
        """sessionId, иначе телефон, иначе общий анонимный ключ."""
        return (session_id or "").strip() or (phone or "").strip() or ANONYMOUS_KEY

    async def handle(
        self,
        session_id: Optional[str],
        phone: Optional[str],
        text: Optional[str],
    ) -> DialogReply:
        key = self.session_key(session_id, phone)
        set_session_id(key)

        async with self.store.locked(key, normalize_phone(phone or "")) as session:
            if self.input_mode == INPUT_MODE_PATH:
                reply = await self.replay.handle(session, text or "")
            else:
                reply = await self.engine.handle(session, text or "")

        await log_info(
            f"USSD ответ ({'END' if reply.terminal else 'CON'})",
            type_msg=TypeMsg.DEBUG,
            extra={"step": str(session.step)},
        )
        return reply
