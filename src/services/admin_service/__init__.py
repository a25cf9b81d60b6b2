"""
Служебные эндпоинты.
"""
