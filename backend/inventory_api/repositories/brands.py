from sqlalchemy import func, select

from inventory_api.models import Brand, VehicleModel
from inventory_api.repositories.base import SqlRepository, norm_like, order_clause
from inventory_api.schemas.filters import BrandFilters


class BrandRepository(SqlRepository):
    conflict_message = "Brand already exists"

    sort_columns = {
        "id": Brand.id,
        "name": Brand.name,
        "createdAt": Brand.created_at,
        "updatedAt": Brand.updated_at,
    }

    def _filtered_stmt(self, search: str | None):
        stmt = select(Brand)
        if search:
            stmt = stmt.where(func.lower(Brand.name).like(norm_like(search)))
        return stmt

    def save(self, name: str) -> Brand:
        with self.guard("saving brand"):
            brand = Brand(name=name)
            self.db.add(brand)
            self.db.commit()
            self.db.refresh(brand)
        return brand

    def find_page(self, filters: BrandFilters) -> list[Brand]:
        sort_column = self.sort_columns.get(filters.sort_by, Brand.name)
        stmt = (
            self._filtered_stmt(filters.search)
            .order_by(order_clause(sort_column, filters.sort_order), Brand.id)
            .offset(filters.offset)
            .limit(filters.limit)
        )
        with self.guard("fetching brands with pagination"):
            return list(self.db.scalars(stmt).all())

    def count(self, search: str | None = None) -> int:
        stmt = select(func.count()).select_from(self._filtered_stmt(search).subquery())
        with self.guard("counting brands"):
            return self.db.scalar(stmt) or 0

    def find_by_id(self, brand_id: int) -> Brand | None:
        with self.guard("fetching brand by id"):
            return self.db.get(Brand, brand_id)

    def find_by_name(self, name: str) -> Brand | None:
        with self.guard("fetching brand by name"):
            return self.db.scalar(select(Brand).where(Brand.name == name))

    def find_models(self, brand_id: int) -> list[VehicleModel]:
        stmt = select(VehicleModel).where(VehicleModel.brand_id == brand_id).order_by(VehicleModel.id)
        with self.guard("fetching brand models"):
            return list(self.db.scalars(stmt).all())

    def update(self, brand: Brand, name: str) -> Brand:
        with self.guard("updating brand"):
            brand.name = name
            self.db.commit()
            self.db.refresh(brand)
        return brand

    def delete(self, brand: Brand) -> None:
        with self.guard("deleting brand"):
            self.db.delete(brand)
            self.db.commit()
