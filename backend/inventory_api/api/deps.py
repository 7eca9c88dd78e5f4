from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.orm import Session

from inventory_api.core.errors import ValidationError
from inventory_api.db.session import get_db
from inventory_api.repositories import BrandRepository, CarRepository, VehicleModelRepository
from inventory_api.schemas.common import SortOrder
from inventory_api.schemas.filters import (
    BRANDS_DEFAULT_LIMIT,
    CARS_DEFAULT_LIMIT,
    MAX_PAGE_LIMIT,
    MODELS_DEFAULT_LIMIT,
    BrandFilters,
    CarFilters,
    VehicleModelFilters,
)
from inventory_api.services import BrandService, CarService, VehicleModelService
from inventory_api.validators import MIN_VEHICLE_YEAR, clean_text

ResourceId = Annotated[int, Path(ge=1, description="Positive numeric identifier", examples=[1])]


def get_brand_service(db: Session = Depends(get_db)) -> BrandService:
    return BrandService(BrandRepository(db))


def get_model_service(db: Session = Depends(get_db)) -> VehicleModelService:
    return VehicleModelService(VehicleModelRepository(db), BrandRepository(db))


def get_car_service(db: Session = Depends(get_db)) -> CarService:
    return CarService(CarRepository(db), VehicleModelRepository(db))


def _query_text(value: str | None, label: str) -> str | None:
    if value is None or not value.strip():
        return None
    try:
        return clean_text(value, label=label)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


def brand_filters(
    page: int = Query(1, ge=1),
    limit: int = Query(BRANDS_DEFAULT_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    search: str | None = Query(None, max_length=100, description="Case-insensitive part of the name"),
    sort_by: str = Query("name", alias="sortBy", description="id, name, createdAt or updatedAt"),
    sort_order: SortOrder = Query("asc", alias="sortOrder"),
) -> BrandFilters:
    return BrandFilters(
        page=page,
        limit=limit,
        search=_query_text(search, "Search term"),
        sort_by=sort_by,
        sort_order=sort_order,
    )


def model_filters(
    page: int = Query(1, ge=1),
    limit: int = Query(MODELS_DEFAULT_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    search: str | None = Query(None, max_length=100, description="Case-insensitive part of the name"),
    brand_id: int | None = Query(None, alias="brandId", ge=1),
    sort_by: str = Query("id", alias="sortBy", description="id, name or fipeValue"),
    sort_order: SortOrder = Query("asc", alias="sortOrder"),
) -> VehicleModelFilters:
    return VehicleModelFilters(
        page=page,
        limit=limit,
        search=_query_text(search, "Search term"),
        brand_id=brand_id,
        sort_by=sort_by,
        sort_order=sort_order,
    )


def car_filters(
    color: str | None = Query(None, max_length=30, description="Case-insensitive part of the color"),
    fuel: str | None = Query(None, max_length=30, description="Case-insensitive part of the fuel type"),
    brand_name: str | None = Query(None, alias="brandName", max_length=100),
    year: int | None = Query(None, ge=MIN_VEHICLE_YEAR),
    year_gte: int | None = Query(None, alias="yearGte", ge=MIN_VEHICLE_YEAR),
    year_lte: int | None = Query(None, alias="yearLte", ge=MIN_VEHICLE_YEAR),
    value_gte: float | None = Query(None, alias="valueGte", ge=0),
    value_lte: float | None = Query(None, alias="valueLte", ge=0),
    number_of_ports: int | None = Query(None, alias="numberOfPorts", ge=1),
    model_id: int | None = Query(None, alias="modelId", ge=1),
    sort_by: str = Query("id", alias="sortBy", description="id, year, color, fuel, numberOfPorts or value"),
    order: SortOrder | None = Query(None),
    sort_order: SortOrder | None = Query(None, alias="sortOrder"),
    page: int = Query(1, ge=1),
    limit: int = Query(CARS_DEFAULT_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
) -> CarFilters:
    return CarFilters(
        page=page,
        limit=limit,
        color=_query_text(color, "Color filter"),
        fuel=_query_text(fuel, "Fuel filter"),
        brand_name=_query_text(brand_name, "Brand name filter"),
        year=year,
        year_gte=year_gte,
        year_lte=year_lte,
        value_gte=value_gte,
        value_lte=value_lte,
        number_of_ports=number_of_ports,
        model_id=model_id,
        sort_by=sort_by,
        sort_order=order or sort_order or "asc",
    )
