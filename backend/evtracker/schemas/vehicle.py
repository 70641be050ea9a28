from pydantic import field_validator
from datetime import datetime

from evtracker.schemas.base import CamelModel
from evtracker.schemas.user import UserRef

MAX_BATTERY_CAPACITY_KWH = 300
MAX_KWH_PER_BAHT = 100


def _finite(v: float) -> float:
    if v != v or v in (float("inf"), float("-inf")):
        raise ValueError("value must be a finite number")
    return v


def check_capacity(v: float) -> float:
    v = _finite(v)
    if v <= 0 or v > MAX_BATTERY_CAPACITY_KWH:
        raise ValueError(f"Battery capacity must be between 0 and {MAX_BATTERY_CAPACITY_KWH} kWh")
    return v


def check_rate(v: float) -> float:
    v = _finite(v)
    if v <= 0 or v > MAX_KWH_PER_BAHT:
        raise ValueError(f"kWh per Baht must be between 0 and {MAX_KWH_PER_BAHT}")
    return v


def check_name(v: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError("Name is required")
    if len(v) > 128:
        raise ValueError("Name is too long")
    return v


class VehicleCreate(CamelModel):
    name: str
    battery_capacity_kwh: float
    kwh_per_baht: float

    @field_validator("name")
    @classmethod
    def name_trim(cls, v: str):
        return check_name(v)

    @field_validator("battery_capacity_kwh")
    @classmethod
    def capacity_range(cls, v: float):
        return check_capacity(v)

    @field_validator("kwh_per_baht")
    @classmethod
    def rate_range(cls, v: float):
        return check_rate(v)


class VehicleUpdate(CamelModel):
    name: str | None = None
    battery_capacity_kwh: float | None = None
    kwh_per_baht: float | None = None

    @field_validator("name")
    @classmethod
    def name_trim(cls, v: str | None):
        if v is None:
            return None
        return check_name(v)

    @field_validator("battery_capacity_kwh")
    @classmethod
    def capacity_range(cls, v: float | None):
        if v is None:
            return None
        return check_capacity(v)

    @field_validator("kwh_per_baht")
    @classmethod
    def rate_range(cls, v: float | None):
        if v is None:
            return None
        return check_rate(v)


class VehicleOut(CamelModel):
    id: int
    name: str
    battery_capacity_kwh: float
    kwh_per_baht: float
    owner_id: int
    created_at: datetime | None = None
    owner: UserRef | None = None
