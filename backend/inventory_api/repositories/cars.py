from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from inventory_api.models import Brand, Car, VehicleModel
from inventory_api.repositories.base import SqlRepository, norm_like, order_clause
from inventory_api.schemas.filters import CarFilters

DEFAULT_SORT_FIELD = "id"


class CarRepository(SqlRepository):
    sort_columns = {
        "id": Car.id,
        "year": Car.year,
        "color": Car.color,
        "fuel": Car.fuel,
        "numberOfPorts": Car.number_of_ports,
        "value": Car.value,
    }

    def _with_model(self, stmt):
        return stmt.options(selectinload(Car.model).selectinload(VehicleModel.brand))

    def _filtered_stmt(self, filters: CarFilters):
        stmt = select(Car)

        if filters.year is not None:
            stmt = stmt.where(Car.year == filters.year)
        if filters.year_gte is not None:
            stmt = stmt.where(Car.year >= filters.year_gte)
        if filters.year_lte is not None:
            stmt = stmt.where(Car.year <= filters.year_lte)

        if filters.value_gte is not None:
            stmt = stmt.where(Car.value >= filters.value_gte)
        if filters.value_lte is not None:
            stmt = stmt.where(Car.value <= filters.value_lte)

        if filters.number_of_ports is not None:
            stmt = stmt.where(Car.number_of_ports == filters.number_of_ports)
        if filters.model_id is not None:
            stmt = stmt.where(Car.model_id == filters.model_id)

        if filters.color:
            stmt = stmt.where(func.lower(Car.color).like(norm_like(filters.color)))
        if filters.fuel:
            stmt = stmt.where(func.lower(Car.fuel).like(norm_like(filters.fuel)))
        if filters.brand_name:
            stmt = (
                stmt.join(Car.model)
                .join(VehicleModel.brand)
                .where(func.lower(Brand.name).like(norm_like(filters.brand_name)))
            )

        return stmt

    def save(self, values: dict[str, object]) -> Car:
        with self.guard("saving car to database"):
            car = Car(**values)
            self.db.add(car)
            self.db.commit()
        return self.find_by_id(car.id)

    def find_with_filters(self, filters: CarFilters) -> list[Car]:
        sort_column = self.sort_columns.get(filters.sort_by, self.sort_columns[DEFAULT_SORT_FIELD])
        stmt = (
            self._with_model(self._filtered_stmt(filters))
            .order_by(order_clause(sort_column, filters.sort_order), Car.id)
            .offset(filters.offset)
            .limit(filters.limit)
        )
        with self.guard("fetching cars with filters"):
            return list(self.db.scalars(stmt).all())

    def count(self, filters: CarFilters) -> int:
        stmt = select(func.count()).select_from(self._filtered_stmt(filters).subquery())
        with self.guard("counting cars"):
            return self.db.scalar(stmt) or 0

    def find_by_id(self, car_id: int) -> Car | None:
        stmt = self._with_model(select(Car)).where(Car.id == car_id)
        with self.guard("fetching car by id"):
            return self.db.scalar(stmt)

    def update(self, car: Car, values: dict[str, object]) -> Car:
        with self.guard("updating car"):
            for field, value in values.items():
                setattr(car, field, value)
            self.db.commit()
        # Drop the cached relationship so a new model_id loads its own model.
        self.db.expire(car)
        return self.find_by_id(car.id)

    def delete(self, car: Car) -> None:
        with self.guard("deleting car"):
            self.db.delete(car)
            self.db.commit()
