from sqlalchemy import Integer, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from evtracker.db.base import Base

class ChargeEvent(Base):
    __tablename__ = "charge_events"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id", ondelete="CASCADE"), index=True)
    start_pct: Mapped[int] = mapped_column(Integer)
    end_pct: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now(), index=True)

    vehicle: Mapped["Vehicle"] = relationship(back_populates="charges")
