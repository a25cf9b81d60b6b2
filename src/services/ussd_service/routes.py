# src/services/ussd_service/routes.py
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as PydanticValidationError

from src.services.dependencies import get_ussd_service
from src.services.ussd_service.schemas import UssdCallback
from src.services.ussd_service.service import UssdService

router = APIRouter(tags=["USSD"])


async def read_callback(request: Request) -> UssdCallback:
    """Шлюзы шлют form-urlencoded, тестовые клиенты иногда JSON."""
    content_type = request.headers.get("content-type", "")
    payload: Any
    try:
        if content_type.startswith("application/json"):
            payload = await request.json()
        else:
            payload = dict(await request.form())
    except ValueError:
        raise HTTPException(status_code=400, detail="Malformed request body")

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be an object")

    try:
        return UssdCallback.model_validate(payload)
    except PydanticValidationError as e:
        raise HTTPException(status_code=400, detail=str(e.errors()[0]["msg"]))


@router.post("/ussd", response_class=PlainTextResponse)
@router.post("/api/ussd/callback", response_class=PlainTextResponse)
async def ussd_callback(
    callback: UssdCallback = Depends(read_callback),
    service: UssdService = Depends(get_ussd_service),
):
    reply = await service.handle(callback.session_id, callback.phone_number, callback.text)
    return PlainTextResponse(reply.render())
