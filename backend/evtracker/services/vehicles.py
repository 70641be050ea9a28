from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from evtracker.models.vehicle import Vehicle


def _with_owner():
    return select(Vehicle).options(selectinload(Vehicle.owner))


def get_vehicle(s: Session, vehicle_id: int) -> Vehicle | None:
    return s.execute(_with_owner().where(Vehicle.id == vehicle_id)).scalar_one_or_none()


def list_vehicles(s: Session, owner_id: int | None = None) -> list[Vehicle]:
    q = _with_owner()
    if owner_id is not None:
        q = q.where(Vehicle.owner_id == owner_id)
    q = q.order_by(Vehicle.created_at.desc(), Vehicle.id.desc())
    return s.execute(q).scalars().all()


def count_vehicles(s: Session, owner_id: int) -> int:
    return s.execute(select(func.count(Vehicle.id)).where(Vehicle.owner_id == owner_id)).scalar_one()


def create_vehicle(s: Session, owner_id: int, name: str, battery_capacity_kwh: float, kwh_per_baht: float) -> Vehicle:
    v = Vehicle(
        owner_id=owner_id,
        name=name,
        battery_capacity_kwh=battery_capacity_kwh,
        kwh_per_baht=kwh_per_baht,
    )
    s.add(v)
    s.commit()
    s.refresh(v)
    return v


def update_vehicle(
    s: Session,
    v: Vehicle,
    name: str | None = None,
    battery_capacity_kwh: float | None = None,
    kwh_per_baht: float | None = None,
) -> Vehicle:
    if name is not None:
        v.name = name
    if battery_capacity_kwh is not None:
        v.battery_capacity_kwh = battery_capacity_kwh
    if kwh_per_baht is not None:
        v.kwh_per_baht = kwh_per_baht
    s.add(v)
    s.commit()
    s.refresh(v)
    return v


def delete_vehicle(s: Session, v: Vehicle) -> None:
    s.delete(v)
    s.commit()
