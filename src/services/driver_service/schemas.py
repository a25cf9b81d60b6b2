# src/services/driver_service/schemas.py
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DriverRequest(BaseModel):
    """Общая конфигурация: camelCase в JSON, лишние поля игнорируются."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class RegisterDriverRequest(DriverRequest):
    name: Optional[str] = None
    id_number: Optional[str] = None
    phone: Optional[str] = None


class LoginDriverRequest(DriverRequest):
    phone: Optional[str] = None


class AcceptTripRequest(DriverRequest):
    driver_id: Optional[str] = None


class UpdateTripStatusRequest(DriverRequest):
    status: Optional[str] = None
