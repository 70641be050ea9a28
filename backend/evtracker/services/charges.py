from datetime import date, datetime, time

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from evtracker.core.errors import ValidationError
from evtracker.models.charge import ChargeEvent
from evtracker.models.vehicle import Vehicle

END_BEFORE_START = "End percentage must be greater than start percentage"


def check_progression(start_pct: int, end_pct: int) -> None:
    if end_pct <= start_pct:
        raise ValidationError(END_BEFORE_START)


def _with_vehicle():
    return select(ChargeEvent).options(selectinload(ChargeEvent.vehicle))


def _newest_first(q):
    return q.order_by(ChargeEvent.created_at.desc(), ChargeEvent.id.desc())


def get_charge(s: Session, charge_id: int) -> ChargeEvent | None:
    return s.execute(_with_vehicle().where(ChargeEvent.id == charge_id)).scalar_one_or_none()


def list_charges_for_owner(s: Session, owner_id: int) -> list[ChargeEvent]:
    q = _with_vehicle().join(Vehicle, ChargeEvent.vehicle_id == Vehicle.id).where(Vehicle.owner_id == owner_id)
    return s.execute(_newest_first(q)).scalars().all()


def list_charges_for_vehicle(
    s: Session,
    vehicle_id: int,
    start: date | None = None,
    end: date | None = None,
) -> list[ChargeEvent]:
    if start is not None and end is not None and start > end:
        raise ValidationError("startDate must not be after endDate")
    q = _with_vehicle().where(ChargeEvent.vehicle_id == vehicle_id)
    if start is not None:
        q = q.where(ChargeEvent.created_at >= datetime.combine(start, time.min))
    if end is not None:
        q = q.where(ChargeEvent.created_at <= datetime.combine(end, time.max))
    return s.execute(_newest_first(q)).scalars().all()


def create_charge(s: Session, vehicle: Vehicle, start_pct: int, end_pct: int) -> ChargeEvent:
    check_progression(start_pct, end_pct)
    c = ChargeEvent(vehicle_id=vehicle.id, start_pct=start_pct, end_pct=end_pct)
    s.add(c)
    s.commit()
    s.refresh(c)
    return c


def update_charge(s: Session, c: ChargeEvent, start_pct: int | None = None, end_pct: int | None = None) -> ChargeEvent:
    final_start = start_pct if start_pct is not None else c.start_pct
    final_end = end_pct if end_pct is not None else c.end_pct
    check_progression(final_start, final_end)
    c.start_pct = final_start
    c.end_pct = final_end
    s.add(c)
    s.commit()
    s.refresh(c)
    return c


def delete_charge(s: Session, c: ChargeEvent) -> None:
    s.delete(c)
    s.commit()
