from datetime import datetime

from pydantic import Field, field_validator

from inventory_api.schemas.common import ApiModel
from inventory_api.schemas.vehicle_model import VehicleModelRef
from inventory_api.validators import MIN_VEHICLE_YEAR, clean_text


class CarIn(ApiModel):
    color: str = Field(min_length=1, max_length=30, examples=["Vermelho"])
    year: int = Field(strict=True, ge=MIN_VEHICLE_YEAR, examples=[2020])
    number_of_ports: int = Field(strict=True, ge=1, examples=[4])
    fuel: str = Field(min_length=2, max_length=30, examples=["Gasolina"])
    value: float = Field(strict=True, gt=0, examples=[52000.0])
    model_id: int = Field(strict=True, ge=1, description="Id of an existing model", examples=[1])

    @field_validator("color")
    @classmethod
    def _clean_color(cls, value: str) -> str:
        return clean_text(value, label="Car color", min_length=2)

    @field_validator("fuel")
    @classmethod
    def _clean_fuel(cls, value: str) -> str:
        return clean_text(value, label="Fuel type", min_length=2)


class CarOut(ApiModel):
    id: int
    color: str
    year: int
    number_of_ports: int
    fuel: str
    value: float
    model_id: int
    created_at: datetime
    updated_at: datetime
    model: VehicleModelRef
