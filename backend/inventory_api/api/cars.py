from fastapi import APIRouter, Depends, status

from inventory_api.api.deps import ResourceId, car_filters, get_car_service
from inventory_api.api.errors import ERROR_RESPONSES
from inventory_api.schemas.car import CarIn, CarOut
from inventory_api.schemas.common import DeletedResponse, ItemResponse, ListResponse
from inventory_api.schemas.filters import CarFilters
from inventory_api.services import CarService

router = APIRouter(prefix="/api", tags=["cars"], responses=ERROR_RESPONSES)


@router.post("/cars", response_model=ItemResponse[CarOut], status_code=status.HTTP_201_CREATED)
def create_car(payload: CarIn, service: CarService = Depends(get_car_service)) -> ItemResponse[CarOut]:
    car = service.create_car(payload)
    return ItemResponse[CarOut](data=CarOut.model_validate(car))


@router.get("/cars", response_model=ListResponse[CarOut])
def list_cars(
    filters: CarFilters = Depends(car_filters),
    service: CarService = Depends(get_car_service),
) -> ListResponse[CarOut]:
    """Filter, sort and paginate cars. Text filters are case-insensitive partial matches."""
    cars, pagination = service.get_cars_with_filters(filters)
    return ListResponse[CarOut](
        data=[CarOut.model_validate(item) for item in cars],
        pagination=pagination,
    )


@router.get("/cars/{car_id}", response_model=ItemResponse[CarOut])
def get_car(car_id: ResourceId, service: CarService = Depends(get_car_service)) -> ItemResponse[CarOut]:
    return ItemResponse[CarOut](data=CarOut.model_validate(service.get_car_by_id(car_id)))


@router.put("/cars/{car_id}", response_model=ItemResponse[CarOut])
def update_car(
    car_id: ResourceId,
    payload: CarIn,
    service: CarService = Depends(get_car_service),
) -> ItemResponse[CarOut]:
    car = service.update_car(car_id, payload)
    return ItemResponse[CarOut](data=CarOut.model_validate(car))


@router.delete("/cars/{car_id}", response_model=DeletedResponse)
def delete_car(car_id: ResourceId, service: CarService = Depends(get_car_service)) -> DeletedResponse:
    service.delete_car(car_id)
    return DeletedResponse()
