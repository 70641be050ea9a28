import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from evtracker.api.deps import db, current_user, RecordId
from evtracker.api.routes.charges import charge_out
from evtracker.models.vehicle import Vehicle
from evtracker.schemas.auth import AuthClaims
from evtracker.schemas.charge import ChargeSummary, ChargeVehicleRef, VehicleChargesOut
from evtracker.schemas.session import OkOut
from evtracker.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from evtracker.services import charges as charge_store
from evtracker.services import vehicles as store
from evtracker.services.access import owned_vehicle
from evtracker.services.metrics import summarize

log = logging.getLogger(__name__)

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def _vehicle_out(v: Vehicle) -> VehicleOut:
    return VehicleOut.model_validate(v)


@router.get("", response_model=list[VehicleOut])
def list_vehicles(
    scope: str | None = Query(default=None),
    s: Session = Depends(db),
    u: AuthClaims = Depends(current_user),
):
    if scope == "all" and u.is_admin:
        rows = store.list_vehicles(s)
    else:
        rows = store.list_vehicles(s, owner_id=u.user_id)
    return [_vehicle_out(v) for v in rows]


@router.post("", response_model=VehicleOut, status_code=201)
def create_vehicle(body: VehicleCreate, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    v = store.create_vehicle(
        s,
        owner_id=u.user_id,
        name=body.name,
        battery_capacity_kwh=body.battery_capacity_kwh,
        kwh_per_baht=body.kwh_per_baht,
    )
    return _vehicle_out(v)


@router.get("/{vehicle_id}", response_model=VehicleOut)
def get_vehicle(vehicle_id: RecordId, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    return _vehicle_out(owned_vehicle(s, vehicle_id, u, allow_admin=True))


@router.put("/{vehicle_id}", response_model=VehicleOut)
def update_vehicle(vehicle_id: RecordId, body: VehicleUpdate, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    v = owned_vehicle(s, vehicle_id, u)
    v = store.update_vehicle(
        s,
        v,
        name=body.name,
        battery_capacity_kwh=body.battery_capacity_kwh,
        kwh_per_baht=body.kwh_per_baht,
    )
    return _vehicle_out(v)


@router.delete("/{vehicle_id}", response_model=OkOut)
def delete_vehicle(vehicle_id: RecordId, s: Session = Depends(db), u: AuthClaims = Depends(current_user)):
    v = owned_vehicle(s, vehicle_id, u)
    store.delete_vehicle(s, v)
    log.info("vehicle %s deleted by user %s", vehicle_id, u.user_id)
    return OkOut(message="EV car deleted successfully")


@router.get("/{vehicle_id}/charges", response_model=VehicleChargesOut)
def list_vehicle_charges(
    vehicle_id: RecordId,
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    s: Session = Depends(db),
    u: AuthClaims = Depends(current_user),
):
    v = owned_vehicle(s, vehicle_id, u)
    rows = charge_store.list_charges_for_vehicle(s, v.id, start=start_date, end=end_date)
    total = summarize(rows)
    return VehicleChargesOut(
        vehicle=ChargeVehicleRef.model_validate(v),
        charges=[charge_out(c) for c in rows],
        summary=ChargeSummary(
            charge_count=total.count,
            total_energy_kwh=total.energy_kwh,
            total_cost_amount=total.cost_amount,
        ),
    )
