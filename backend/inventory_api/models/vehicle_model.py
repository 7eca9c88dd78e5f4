from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from inventory_api.models.brand import Brand
    from inventory_api.models.car import Car


class VehicleModel(TimestampMixin, Base):
    __tablename__ = "models"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    brand_id: Mapped[int] = mapped_column(ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)
    fipe_value: Mapped[float] = mapped_column(Float, nullable=False)

    brand: Mapped["Brand"] = relationship(back_populates="models")
    cars: Mapped[list["Car"]] = relationship(
        back_populates="model",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
