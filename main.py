#!/usr/bin/env python3
# main.py
"""
Главная точка входа QuickRide.
Запускает HTTP-сервер USSD-бэкенда.
"""

from __future__ import annotations

import asyncio

from src.config import settings
from src.common.logger import setup_logging, log_info
from src.common.constants import TypeMsg


async def run_server() -> None:
    """Запускает FastAPI-приложение под uvicorn."""
    import uvicorn

    await log_info(
        f"Запуск {settings.ussd.SERVICE_NAME} на {settings.server.HOST}:{settings.server.PORT} "
        f"(окружение {settings.system.ENVIRONMENT})",
        type_msg=TypeMsg.INFO,
    )

    config = uvicorn.Config(
        "src.services.app:app",
        host=settings.server.HOST,
        port=settings.server.PORT,
        reload=settings.system.DEBUG,
        log_level="debug" if settings.system.DEBUG else "info",
    )

    server = uvicorn.Server(config)
    try:
        await server.serve()
    except asyncio.CancelledError:
        await log_info("Сервер: graceful shutdown", type_msg=TypeMsg.DEBUG)
        await server.shutdown()


def main() -> None:
    setup_logging()
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
