from sqlalchemy import func, select

from inventory_api.models import VehicleModel
from inventory_api.repositories.base import SqlRepository, norm_like, order_clause
from inventory_api.schemas.filters import VehicleModelFilters


class VehicleModelRepository(SqlRepository):
    conflict_message = "A model with this name already exists"

    sort_columns = {
        "id": VehicleModel.id,
        "name": VehicleModel.name,
        "fipeValue": VehicleModel.fipe_value,
    }

    def _filtered_stmt(self, filters: VehicleModelFilters):
        stmt = select(VehicleModel)
        if filters.search:
            stmt = stmt.where(func.lower(VehicleModel.name).like(norm_like(filters.search)))
        if filters.brand_id is not None:
            stmt = stmt.where(VehicleModel.brand_id == filters.brand_id)
        return stmt

    def save(self, *, name: str, brand_id: int, fipe_value: float) -> VehicleModel:
        with self.guard("saving model"):
            model = VehicleModel(name=name, brand_id=brand_id, fipe_value=fipe_value)
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        return model

    def find_page(self, filters: VehicleModelFilters) -> list[VehicleModel]:
        sort_column = self.sort_columns.get(filters.sort_by, VehicleModel.id)
        stmt = (
            self._filtered_stmt(filters)
            .order_by(order_clause(sort_column, filters.sort_order), VehicleModel.id)
            .offset(filters.offset)
            .limit(filters.limit)
        )
        with self.guard("retrieving models"):
            return list(self.db.scalars(stmt).all())

    def count(self, filters: VehicleModelFilters) -> int:
        stmt = select(func.count()).select_from(self._filtered_stmt(filters).subquery())
        with self.guard("counting models"):
            return self.db.scalar(stmt) or 0

    def find_by_id(self, model_id: int) -> VehicleModel | None:
        with self.guard("finding model by id"):
            return self.db.get(VehicleModel, model_id)

    def find_by_name(self, name: str) -> VehicleModel | None:
        with self.guard("finding model by name"):
            return self.db.scalar(select(VehicleModel).where(VehicleModel.name == name))

    def update(self, model: VehicleModel, *, name: str, brand_id: int, fipe_value: float) -> VehicleModel:
        with self.guard("updating model"):
            model.name = name
            model.brand_id = brand_id
            model.fipe_value = fipe_value
            self.db.commit()
            self.db.refresh(model)
        return model

    def delete(self, model: VehicleModel) -> None:
        with self.guard("deleting model"):
            self.db.delete(model)
            self.db.commit()
