# src/services/ussd_service/schemas.py
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UssdCallback(BaseModel):
    """Колбэк шлюза. Поля, которых нет в запросе, считаются пустыми."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    session_id: Optional[str] = Field(None, alias="sessionId")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    service_code: Optional[str] = Field(None, alias="serviceCode")
    text: str = Field("", validation_alias=AliasChoices("text", "userText"))
