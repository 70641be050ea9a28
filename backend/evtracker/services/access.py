from sqlalchemy.orm import Session

from evtracker.core.errors import AuthorizationError, NotFoundError
from evtracker.models.charge import ChargeEvent
from evtracker.models.vehicle import Vehicle
from evtracker.schemas.auth import AuthClaims
from evtracker.services import charges as charge_store
from evtracker.services import vehicles as vehicle_store


def owned_vehicle(s: Session, vehicle_id: int, u: AuthClaims, allow_admin: bool = False) -> Vehicle:
    # existence is checked before ownership; allow_admin only on the single-vehicle read
    v = vehicle_store.get_vehicle(s, vehicle_id)
    if v is None:
        raise NotFoundError("EV car not found")
    if v.owner_id != u.user_id and not (allow_admin and u.is_admin):
        raise AuthorizationError("Access denied")
    return v


def owned_charge(s: Session, charge_id: int, u: AuthClaims) -> ChargeEvent:
    c = charge_store.get_charge(s, charge_id)
    if c is None:
        raise NotFoundError("Charge record not found")
    if c.vehicle.owner_id != u.user_id:
        raise AuthorizationError("Access denied")
    return c
