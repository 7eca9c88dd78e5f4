from inventory_api.schemas.brand import BrandIn, BrandOut, BrandRef
from inventory_api.schemas.car import CarIn, CarOut
from inventory_api.schemas.common import DeletedResponse, ErrorOut, ItemResponse, ListResponse, PaginationOut
from inventory_api.schemas.vehicle_model import BrandVehicleModelOut, VehicleModelIn, VehicleModelOut, VehicleModelRef

__all__ = [
    "BrandIn",
    "BrandOut",
    "BrandRef",
    "BrandVehicleModelOut",
    "CarIn",
    "CarOut",
    "DeletedResponse",
    "ErrorOut",
    "ItemResponse",
    "ListResponse",
    "PaginationOut",
    "VehicleModelIn",
    "VehicleModelOut",
    "VehicleModelRef",
]
