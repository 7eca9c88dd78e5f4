from datetime import datetime

from pydantic import Field, field_validator

from inventory_api.schemas.common import ApiModel
from inventory_api.validators import clean_text


class BrandIn(ApiModel):
    name: str = Field(min_length=1, max_length=100, description="Brand name, e.g. Toyota", examples=["Toyota"])

    @field_validator("name")
    @classmethod
    def _clean_name(cls, value: str) -> str:
        return clean_text(value, label="Brand name", min_length=2)


class BrandOut(ApiModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class BrandRef(ApiModel):
    id: int
    name: str
