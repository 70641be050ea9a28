from pydantic import Field, field_validator
from datetime import datetime

from evtracker.schemas.base import CamelModel, MAX_ID


def check_pct(v: int, label: str = "Percentage") -> int:
    if v < 0 or v > 100:
        raise ValueError(f"{label} must be between 0 and 100")
    return v


class ChargeCreate(CamelModel):
    vehicle_id: int = Field(ge=1, le=MAX_ID)
    start_pct: int
    end_pct: int

    @field_validator("start_pct")
    @classmethod
    def start_range(cls, v: int):
        return check_pct(v, "Start percentage")

    @field_validator("end_pct")
    @classmethod
    def end_range(cls, v: int):
        return check_pct(v, "End percentage")


class ChargeUpdate(CamelModel):
    start_pct: int | None = None
    end_pct: int | None = None

    @field_validator("start_pct")
    @classmethod
    def start_range(cls, v: int | None):
        if v is None:
            return None
        return check_pct(v, "Start percentage")

    @field_validator("end_pct")
    @classmethod
    def end_range(cls, v: int | None):
        if v is None:
            return None
        return check_pct(v, "End percentage")


class ChargeVehicleRef(CamelModel):
    id: int
    name: str
    owner_id: int
    battery_capacity_kwh: float
    kwh_per_baht: float


class ChargeOut(CamelModel):
    id: int
    vehicle_id: int
    start_pct: int
    end_pct: int
    created_at: datetime | None = None
    energy_kwh: float
    cost_amount: float
    vehicle: ChargeVehicleRef


class ChargeSummary(CamelModel):
    charge_count: int = 0
    total_energy_kwh: float = 0.0
    total_cost_amount: float = 0.0


class UserChargeSummary(ChargeSummary):
    vehicle_count: int = 0


class VehicleChargesOut(CamelModel):
    vehicle: ChargeVehicleRef
    charges: list[ChargeOut]
    summary: ChargeSummary
