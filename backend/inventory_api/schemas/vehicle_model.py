from datetime import datetime

from pydantic import Field, field_validator

from inventory_api.schemas.brand import BrandRef
from inventory_api.schemas.common import ApiModel
from inventory_api.validators import clean_text


class VehicleModelIn(ApiModel):
    name: str = Field(min_length=1, max_length=100, description="Model name, e.g. Corolla", examples=["Corolla"])
    brand_id: int = Field(strict=True, ge=1, description="Id of an existing brand", examples=[1])
    fipe_value: float = Field(strict=True, ge=0, description="FIPE table value", examples=[50000])

    @field_validator("name")
    @classmethod
    def _clean_name(cls, value: str) -> str:
        return clean_text(value, label="Model name", min_length=2)


class VehicleModelOut(ApiModel):
    id: int
    name: str
    brand_id: int
    fipe_value: float
    created_at: datetime
    updated_at: datetime


class BrandVehicleModelOut(ApiModel):
    """A model listed under its brand, so the brand id is left out."""

    id: int
    name: str
    fipe_value: float
    created_at: datetime
    updated_at: datetime


class VehicleModelRef(ApiModel):
    id: int
    name: str
    brand: BrandRef
