import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from evtracker.api.deps import db, current_user, RecordId
from evtracker.models.charge import ChargeEvent
from evtracker.schemas.auth import AuthClaims
from evtracker.schemas.charge import (
    ChargeCreate,
    ChargeOut,
    ChargeUpdate,
    ChargeVehicleRef,
    UserChargeSummary,
)
from evtracker.schemas.session import OkOut
from evtracker.services import charges as store
from evtracker.services.access import owned_charge, owned_vehicle
from evtracker.services.metrics import compute_for, summarize
from evtracker.services.vehicles import count_vehicles

log = logging.getLogger(__name__)

router = APIRouter(prefix="/charges", tags=["charges"])


def charge_out(c: ChargeEvent) -> ChargeOut:
    m = compute_for(c.vehicle, c)
    return ChargeOut(
        id=c.id,
        vehicle_id=c.vehicle_id,
        start_pct=c.start_pct,
        end_pct=c.end_pct,
        created_at=c.created_at,
        energy_kwh=m.energy_kwh,
        cost_amount=m.cost_amount,
        vehicle=ChargeVehicleRef.model_validate(c.vehicle),
    )


@router.get("", response_model=list[ChargeOut])
def list_charges(s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    return [charge_out(c) for c in store.list_charges_for_owner(s, u.user_id)]


@router.get("/summary", response_model=UserChargeSummary)
def charges_summary(s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    total = summarize(store.list_charges_for_owner(s, u.user_id))
    return UserChargeSummary(
        charge_count=total.count,
        vehicle_count=count_vehicles(s, u.user_id),
        total_energy_kwh=total.energy_kwh,
        total_cost_amount=total.cost_amount,
    )


@router.post("", response_model=ChargeOut, status_code=201)
def create_charge(body: ChargeCreate, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    v = owned_vehicle(s, body.vehicle_id, u)
    c = store.create_charge(s, v, body.start_pct, body.end_pct)
    return charge_out(c)


@router.get("/{charge_id}", response_model=ChargeOut)
def get_charge(charge_id: RecordId, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    return charge_out(owned_charge(s, charge_id, u))


@router.put("/{charge_id}", response_model=ChargeOut)
def update_charge(charge_id: RecordId, body: ChargeUpdate, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    c = owned_charge(s, charge_id, u)
    c = store.update_charge(s, c, start_pct=body.start_pct, end_pct=body.end_pct)
    return charge_out(c)


@router.delete("/{charge_id}", response_model=OkOut)
def delete_charge(charge_id: RecordId, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    c = owned_charge(s, charge_id, u)
    store.delete_charge(s, c)
    log.info("charge %s deleted by user %s", charge_id, u.user_id)
    return OkOut(message="Charge record deleted successfully")
