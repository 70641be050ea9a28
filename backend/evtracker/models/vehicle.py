from sqlalchemy import String, Integer, DateTime, Float, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from evtracker.db.base import Base

class Vehicle(Base):
    __tablename__ = "vehicles"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128))
    battery_capacity_kwh: Mapped[float] = mapped_column(Float)
    kwh_per_baht: Mapped[float] = mapped_column(Float)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now(), index=True)

    owner: Mapped["User"] = relationship(back_populates="vehicles")
    charges: Mapped[list["ChargeEvent"]] = relationship(
        back_populates="vehicle",
        cascade="all, delete-orphan",
    )
