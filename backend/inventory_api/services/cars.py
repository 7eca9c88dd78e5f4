import logging

from inventory_api.core.errors import NotFoundError, ValidationError
from inventory_api.models import Car
from inventory_api.repositories import CarRepository, VehicleModelRepository
from inventory_api.schemas.car import CarIn
from inventory_api.schemas.common import PaginationOut
from inventory_api.schemas.filters import CarFilters

logger = logging.getLogger(__name__)

CAR_NOT_FOUND = "Car not found"
MODEL_MISSING = "Referenced model does not exist"


def _car_values(payload: CarIn) -> dict[str, object]:
    return {
        "color": payload.color,
        "year": payload.year,
        "number_of_ports": payload.number_of_ports,
        "fuel": payload.fuel,
        "value": payload.value,
        "model_id": payload.model_id,
    }


class CarService:
    def __init__(self, cars: CarRepository, models: VehicleModelRepository) -> None:
        self.cars = cars
        self.models = models

    def _ensure_model(self, model_id: int) -> None:
        if self.models.find_by_id(model_id) is None:
            raise ValidationError(MODEL_MISSING)

    def create_car(self, payload: CarIn) -> Car:
        self._ensure_model(payload.model_id)
        car = self.cars.save(_car_values(payload))
        logger.info("Created car id=%s model_id=%s", car.id, car.model_id)
        return car

    def get_cars_with_filters(self, filters: CarFilters) -> tuple[list[Car], PaginationOut]:
        total = self.cars.count(filters)
        cars = self.cars.find_with_filters(filters)
        return cars, PaginationOut.build(page=filters.page, limit=filters.limit, total=total)

    def get_car_by_id(self, car_id: int) -> Car:
        car = self.cars.find_by_id(car_id)
        if car is None:
            raise NotFoundError(CAR_NOT_FOUND)
        return car

    def update_car(self, car_id: int, payload: CarIn) -> Car:
        car = self.get_car_by_id(car_id)
        self._ensure_model(payload.model_id)
        car = self.cars.update(car, _car_values(payload))
        logger.info("Updated car id=%s", car.id)
        return car

    def delete_car(self, car_id: int) -> None:
        car = self.get_car_by_id(car_id)
        self.cars.delete(car)
        logger.info("Deleted car id=%s", car_id)
