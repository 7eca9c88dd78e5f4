from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from inventory_api.models.vehicle_model import VehicleModel


class Car(TimestampMixin, Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    color: Mapped[str] = mapped_column(String(30), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    number_of_ports: Mapped[int] = mapped_column(Integer, nullable=False)
    fuel: Mapped[str] = mapped_column(String(30), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    model_id: Mapped[int] = mapped_column(ForeignKey("models.id", ondelete="CASCADE"), nullable=False, index=True)

    model: Mapped["VehicleModel"] = relationship(back_populates="cars")
