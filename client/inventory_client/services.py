from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from inventory_client.client import ApiClient


@dataclass
class Page:
    items: list[dict[str, Any]]
    pagination: dict[str, Any] = field(default_factory=dict)


def to_payload(data: BaseModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    return dict(data)


def to_query(filters: dict[str, Any]) -> dict[str, Any]:
    return {to_camel(key): value for key, value in filters.items() if value is not None}


class ResourceService:
    path = ""

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def list(self, **filters: Any) -> Page:
        body = self.api.get(self.path, params=to_query(filters))
        return Page(items=body["data"], pagination=body.get("pagination") or {})

    def get(self, item_id: int) -> dict[str, Any]:
        return self.api.get(f"{self.path}/{item_id}")["data"]

    def create(self, data: BaseModel | dict[str, Any]) -> dict[str, Any]:
        return self.api.post(self.path, json=to_payload(data))["data"]

    def update(self, item_id: int, data: BaseModel | dict[str, Any]) -> dict[str, Any]:
        return self.api.put(f"{self.path}/{item_id}", json=to_payload(data))["data"]

    def delete(self, item_id: int) -> None:
        self.api.delete(f"{self.path}/{item_id}")


class BrandService(ResourceService):
    path = "brands"

    def models_of(self, brand_id: int) -> list[dict[str, Any]]:
        return self.api.get(f"{self.path}/{brand_id}/models")["data"]


class ModelService(ResourceService):
    path = "models"


class CarService(ResourceService):
    """Cars accept snake_case filters, e.g. ``list(brand_name="toy", year_gte=2020, sort_by="value")``."""

    path = "cars"
