from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from inventory_api.schemas.common import ApiModel
from inventory_api.validators import MIN_VEHICLE_YEAR, clean_text


class BrandForm(ApiModel):
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def _clean_name(cls, value: str) -> str:
        return clean_text(value, label="Brand name", min_length=2)


class VehicleModelForm(ApiModel):
    name: str = Field(min_length=1, max_length=100)
    brand_id: int = Field(ge=1)
    fipe_value: float = Field(ge=0)

    @field_validator("name")
    @classmethod
    def _clean_name(cls, value: str) -> str:
        return clean_text(value, label="Model name", min_length=2)


class CarForm(ApiModel):
    # Lax numbers: form inputs usually arrive as strings.
    color: str = Field(min_length=1, max_length=30)
    year: int = Field(ge=MIN_VEHICLE_YEAR)
    number_of_ports: int = Field(ge=1)
    fuel: str = Field(min_length=2, max_length=30)
    value: float = Field(gt=0)
    model_id: int = Field(ge=1)

    @field_validator("color")
    @classmethod
    def _clean_color(cls, value: str) -> str:
        return clean_text(value, label="Car color", min_length=2)

    @field_validator("fuel")
    @classmethod
    def _clean_fuel(cls, value: str) -> str:
        return clean_text(value, label="Fuel type", min_length=2)


def validate_form(form_cls: type[BaseModel], data: dict[str, Any]) -> tuple[BaseModel | None, dict[str, str]]:
    """Return ``(form, {})`` for valid input or ``(None, {field: message})`` otherwise."""
    try:
        return form_cls.model_validate(data), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for item in exc.errors():
            field = ".".join(str(part) for part in item["loc"]) or "__root__"
            ctx = item.get("ctx") or {}
            message = str(ctx["error"]) if item["type"] == "value_error" and "error" in ctx else item["msg"]
            errors.setdefault(field, message)
        return None, errors
