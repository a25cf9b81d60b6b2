# src/services/driver_service/routes.py
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from src.common.exceptions import QuickRideError
from src.core.drivers import DriverRegistry
from src.core.trips import TripRegistry
from src.services.dependencies import get_driver_registry, get_trip_registry
from src.services.driver_service.schemas import (
    AcceptTripRequest,
    LoginDriverRequest,
    RegisterDriverRequest,
    UpdateTripStatusRequest,
)

router = APIRouter(prefix="/driver", tags=["Drivers"])


def _http_error(error: QuickRideError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)


@router.post("/register")
async def register_driver(
    request: RegisterDriverRequest,
    drivers: DriverRegistry = Depends(get_driver_registry),
):
    try:
        driver = await drivers.register(request.name, request.id_number, request.phone)
    except QuickRideError as e:
        raise _http_error(e)
    return {"message": "Driver registered", "driverId": driver.id}


@router.post("/login")
async def login_driver(
    request: LoginDriverRequest,
    drivers: DriverRegistry = Depends(get_driver_registry),
):
    try:
        driver = await drivers.login(request.phone)
    except QuickRideError as e:
        # Неизвестный водитель - ошибка запроса, а не отсутствующий ресурс
        raise HTTPException(status_code=400, detail=e.message)
    return {"message": "Login successful", "driverId": driver.id, "name": driver.name}


@router.get("/trips/pending")
async def list_pending_trips(drivers: DriverRegistry = Depends(get_driver_registry)):
    return [trip.model_dump(mode="json", by_alias=True) for trip in drivers.list_pending_trips()]


@router.post("/trips/{trip_id}/accept")
async def accept_trip(
    trip_id: str,
    request: Optional[AcceptTripRequest] = Body(None),
    trips: TripRegistry = Depends(get_trip_registry),
):
    # driverId - слабая ссылка: наличие водителя в реестре не проверяется
    driver_id = (request.driver_id or "").strip() if request else ""
    if not driver_id:
        raise HTTPException(status_code=400, detail="driverId is required")
    try:
        trip = await trips.claim(trip_id, driver_id)
    except QuickRideError as e:
        raise _http_error(e)
    return trip.model_dump(mode="json", by_alias=True)


@router.post("/trips/{trip_id}/decline")
async def decline_trip(trip_id: str):
    return {"message": "Trip declined", "tripId": trip_id}


@router.post("/trips/{trip_id}/update")
async def update_trip_status(
    trip_id: str,
    request: Optional[UpdateTripStatusRequest] = Body(None),
    trips: TripRegistry = Depends(get_trip_registry),
):
    status = request.status if request else None
    try:
        trip = await trips.set_status(trip_id, status)
    except QuickRideError as e:
        raise _http_error(e)
    return trip.model_dump(mode="json", by_alias=True)
