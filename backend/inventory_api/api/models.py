from fastapi import APIRouter, Depends, status

from inventory_api.api.deps import ResourceId, get_model_service, model_filters
from inventory_api.api.errors import ERROR_RESPONSES
from inventory_api.schemas.common import DeletedResponse, ItemResponse, ListResponse
from inventory_api.schemas.filters import VehicleModelFilters
from inventory_api.schemas.vehicle_model import VehicleModelIn, VehicleModelOut
from inventory_api.services import VehicleModelService

router = APIRouter(prefix="/api", tags=["models"], responses=ERROR_RESPONSES)


@router.post("/models", response_model=ItemResponse[VehicleModelOut], status_code=status.HTTP_201_CREATED)
def create_model(
    payload: VehicleModelIn,
    service: VehicleModelService = Depends(get_model_service),
) -> ItemResponse[VehicleModelOut]:
    model = service.create_model(payload)
    return ItemResponse[VehicleModelOut](data=VehicleModelOut.model_validate(model))


@router.get("/models", response_model=ListResponse[VehicleModelOut])
def list_models(
    filters: VehicleModelFilters = Depends(model_filters),
    service: VehicleModelService = Depends(get_model_service),
) -> ListResponse[VehicleModelOut]:
    models, pagination = service.get_all_models(filters)
    return ListResponse[VehicleModelOut](
        data=[VehicleModelOut.model_validate(item) for item in models],
        pagination=pagination,
    )


@router.get("/models/{model_id}", response_model=ItemResponse[VehicleModelOut])
def get_model(
    model_id: ResourceId,
    service: VehicleModelService = Depends(get_model_service),
) -> ItemResponse[VehicleModelOut]:
    return ItemResponse[VehicleModelOut](data=VehicleModelOut.model_validate(service.get_model_by_id(model_id)))


@router.put("/models/{model_id}", response_model=ItemResponse[VehicleModelOut])
def update_model(
    model_id: ResourceId,
    payload: VehicleModelIn,
    service: VehicleModelService = Depends(get_model_service),
) -> ItemResponse[VehicleModelOut]:
    model = service.update_model(model_id, payload)
    return ItemResponse[VehicleModelOut](data=VehicleModelOut.model_validate(model))


@router.delete("/models/{model_id}", response_model=DeletedResponse)
def delete_model(model_id: ResourceId, service: VehicleModelService = Depends(get_model_service)) -> DeletedResponse:
    service.delete_model(model_id)
    return DeletedResponse()
