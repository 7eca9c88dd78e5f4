from dataclasses import dataclass

from inventory_api.schemas.common import SortOrder

BRANDS_DEFAULT_LIMIT = 10
MODELS_DEFAULT_LIMIT = 10
CARS_DEFAULT_LIMIT = 50
MAX_PAGE_LIMIT = 100


@dataclass
class PageParams:
    page: int = 1
    limit: int = BRANDS_DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class BrandFilters(PageParams):
    search: str | None = None
    sort_by: str = "name"
    sort_order: SortOrder = "asc"


@dataclass
class VehicleModelFilters(PageParams):
    search: str | None = None
    brand_id: int | None = None
    sort_by: str = "id"
    sort_order: SortOrder = "asc"


@dataclass
class CarFilters(PageParams):
    limit: int = CARS_DEFAULT_LIMIT
    color: str | None = None
    fuel: str | None = None
    brand_name: str | None = None
    year: int | None = None
    year_gte: int | None = None
    year_lte: int | None = None
    value_gte: float | None = None
    value_lte: float | None = None
    number_of_ports: int | None = None
    model_id: int | None = None
    sort_by: str = "id"
    sort_order: SortOrder = "asc"
