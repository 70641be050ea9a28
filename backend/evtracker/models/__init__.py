from evtracker.models.user import User
from evtracker.models.vehicle import Vehicle
from evtracker.models.charge import ChargeEvent

__all__ = ["User", "Vehicle", "ChargeEvent"]
