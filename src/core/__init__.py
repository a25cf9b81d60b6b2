# src/core/__init__.py
"""
Доменный слой (Core Domain).
Чистая бизнес-логика, независимая от HTTP: каталог локаций, тарифы,
сессии, USSD-диалог, поездки и водители.
"""
