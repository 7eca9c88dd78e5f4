from fastapi import APIRouter, Depends, status

from inventory_api.api.deps import ResourceId, brand_filters, get_brand_service
from inventory_api.api.errors import ERROR_RESPONSES
from inventory_api.schemas.brand import BrandIn, BrandOut
from inventory_api.schemas.common import DeletedResponse, ItemResponse, ListResponse
from inventory_api.schemas.filters import BrandFilters
from inventory_api.schemas.vehicle_model import BrandVehicleModelOut
from inventory_api.services import BrandService

router = APIRouter(prefix="/api", tags=["brands"], responses=ERROR_RESPONSES)


@router.post("/brands", response_model=ItemResponse[BrandOut], status_code=status.HTTP_201_CREATED)
def create_brand(payload: BrandIn, service: BrandService = Depends(get_brand_service)) -> ItemResponse[BrandOut]:
    brand = service.create_brand(payload)
    return ItemResponse[BrandOut](data=BrandOut.model_validate(brand))


@router.get("/brands", response_model=ListResponse[BrandOut])
def list_brands(
    filters: BrandFilters = Depends(brand_filters),
    service: BrandService = Depends(get_brand_service),
) -> ListResponse[BrandOut]:
    brands, pagination = service.get_all_brands(filters)
    return ListResponse[BrandOut](
        data=[BrandOut.model_validate(item) for item in brands],
        pagination=pagination,
    )


@router.get("/brands/{brand_id}", response_model=ItemResponse[BrandOut])
def get_brand(brand_id: ResourceId, service: BrandService = Depends(get_brand_service)) -> ItemResponse[BrandOut]:
    return ItemResponse[BrandOut](data=BrandOut.model_validate(service.get_brand_by_id(brand_id)))


@router.get("/brands/{brand_id}/models", response_model=ItemResponse[list[BrandVehicleModelOut]])
def list_brand_models(
    brand_id: ResourceId,
    service: BrandService = Depends(get_brand_service),
) -> ItemResponse[list[BrandVehicleModelOut]]:
    models = service.get_models_by_brand_id(brand_id)
    return ItemResponse[list[BrandVehicleModelOut]](
        data=[BrandVehicleModelOut.model_validate(item) for item in models]
    )


@router.put("/brands/{brand_id}", response_model=ItemResponse[BrandOut])
def update_brand(
    brand_id: ResourceId,
    payload: BrandIn,
    service: BrandService = Depends(get_brand_service),
) -> ItemResponse[BrandOut]:
    brand = service.update_brand(brand_id, payload)
    return ItemResponse[BrandOut](data=BrandOut.model_validate(brand))


@router.delete("/brands/{brand_id}", response_model=DeletedResponse)
def delete_brand(brand_id: ResourceId, service: BrandService = Depends(get_brand_service)) -> DeletedResponse:
    service.delete_brand(brand_id)
    return DeletedResponse()
