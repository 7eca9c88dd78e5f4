from inventory_api.models.brand import Brand
from inventory_api.models.car import Car
from inventory_api.models.vehicle_model import VehicleModel

__all__ = ["Brand", "VehicleModel", "Car"]
