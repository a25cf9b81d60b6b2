# src/services/__init__.py
"""
HTTP-слой приложения.

Одно FastAPI-приложение (src.services.app) с роутерами:
- ussd_service: колбэки USSD-шлюза
- driver_service: регистрация, вход и работа водителя с поездками
- admin_service: перезагрузка каталога
"""

__all__: list[str] = []
