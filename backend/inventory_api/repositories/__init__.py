from inventory_api.repositories.brands import BrandRepository
from inventory_api.repositories.cars import CarRepository
from inventory_api.repositories.vehicle_models import VehicleModelRepository

__all__ = ["BrandRepository", "VehicleModelRepository", "CarRepository"]
