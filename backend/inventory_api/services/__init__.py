from inventory_api.services.brands import BrandService
from inventory_api.services.cars import CarService
from inventory_api.services.vehicle_models import VehicleModelService

__all__ = ["BrandService", "VehicleModelService", "CarService"]
