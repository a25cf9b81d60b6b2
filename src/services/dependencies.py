# src/services/dependencies.py
from fastapi import Request

from src.core.drivers import DriverRegistry
from src.core.trips import TripRegistry
from src.services.state import AppState
from src.services.ussd_service.service import UssdService


def get_app_state(request: Request) -> AppState:
    return request.app.state.quickride


def get_ussd_service(request: Request) -> UssdService:
    return get_app_state(request).ussd


def get_trip_registry(request: Request) -> TripRegistry:
    return get_app_state(request).trips


def get_driver_registry(request: Request) -> DriverRegistry:
    return get_app_state(request).drivers
