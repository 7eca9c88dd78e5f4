from inventory_client.cache import ResourceCache
from inventory_client.client import ApiClient, ApiError
from inventory_client.forms import BrandForm, CarForm, VehicleModelForm, validate_form
from inventory_client.services import BrandService, CarService, ModelService, Page

__all__ = [
    "ApiClient",
    "ApiError",
    "BrandForm",
    "BrandService",
    "CarForm",
    "CarService",
    "ModelService",
    "Page",
    "ResourceCache",
    "VehicleModelForm",
    "validate_form",
]
