# src/core/dialog/replay.py
"""
Режим накопленного пути.

Часть шлюзов присылает в text весь путь ввода с начала сессии: "1*2*0*3".
Адаптер сводит такой запрос к пошаговым вызовам DialogEngine.handle():

- путь продолжает уже применённые токены -> применяются только новые;
- путь совпадает с применённым -> повторяется последний ответ (ретрай шлюза);
- любой другой путь -> сессия сбрасывается и путь проигрывается с начала;
- пустой путь -> главное меню.

Проигрывание останавливается на первом завершающем ответе.
"""

from __future__ import annotations

from src.common.constants import TypeMsg
from src.common.logger import log_info
from src.core.dialog.engine import DialogEngine, DialogReply
from src.core.sessions.models import Session


PATH_SEPARATOR = "*"


def split_path(path: str) -> list[str]:
    """Разбивает накопленный путь на токены."""
    path = (path or "").strip()
    if not path:
        return []
    return [token.strip() for token in path.split(PATH_SEPARATOR)]


class PathReplayAdapter:
    """Адаптер "путь целиком" поверх пошагового движка."""

    def __init__(self, engine: DialogEngine) -> None:
        self.engine = engine

    async def handle(self, session: Session, path: str) -> DialogReply:
        tokens = split_path(path)
        applied = list(session.tokens)

        if applied and tokens == applied and session.last_reply is not None:
            await log_info("Повтор запроса шлюза, возвращаем последний ответ", type_msg=TypeMsg.DEBUG)
            return DialogReply.parse(session.last_reply)

        last = DialogReply.parse(session.last_reply) if session.last_reply else None
        extends = (
            applied
            and len(tokens) > len(applied)
            and tokens[: len(applied)] == applied
            and last is not None
            and not last.terminal
        )
        if extends:
            pending = tokens[len(applied):]
        else:
            session.reset()
            applied = []
            pending = tokens

        if not pending:
            reply = await self.engine.handle(session, "")
        else:
            reply = None
            for token in pending:
                reply = await self.engine.handle(session, token)
                applied.append(token)
                if reply.terminal:
                    break

        # Движок мог сбросить сессию (отмена, завершение), поэтому учёт пишется после
        session.tokens = applied
        session.last_reply = reply.render()
        return reply
