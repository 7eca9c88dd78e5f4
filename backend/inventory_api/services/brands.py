import logging

from inventory_api.core.errors import ConflictError, NotFoundError
from inventory_api.models import Brand, VehicleModel
from inventory_api.repositories import BrandRepository
from inventory_api.schemas.brand import BrandIn
from inventory_api.schemas.common import PaginationOut
from inventory_api.schemas.filters import BrandFilters

logger = logging.getLogger(__name__)

BRAND_NOT_FOUND = "Brand not found"
BRAND_EXISTS = "Brand already exists"


class BrandService:
    def __init__(self, brands: BrandRepository) -> None:
        self.brands = brands

    def create_brand(self, payload: BrandIn) -> Brand:
        if self.brands.find_by_name(payload.name) is not None:
            raise ConflictError(BRAND_EXISTS)
        brand = self.brands.save(payload.name)
        logger.info("Created brand id=%s name=%s", brand.id, brand.name)
        return brand

    def get_all_brands(self, filters: BrandFilters) -> tuple[list[Brand], PaginationOut]:
        total = self.brands.count(filters.search)
        brands = self.brands.find_page(filters)
        return brands, PaginationOut.build(page=filters.page, limit=filters.limit, total=total)

    def get_brand_by_id(self, brand_id: int) -> Brand:
        brand = self.brands.find_by_id(brand_id)
        if brand is None:
            raise NotFoundError(BRAND_NOT_FOUND)
        return brand

    def get_models_by_brand_id(self, brand_id: int) -> list[VehicleModel]:
        self.get_brand_by_id(brand_id)
        return self.brands.find_models(brand_id)

    def update_brand(self, brand_id: int, payload: BrandIn) -> Brand:
        brand = self.get_brand_by_id(brand_id)
        holder = self.brands.find_by_name(payload.name)
        if holder is not None and holder.id != brand.id:
            raise ConflictError(BRAND_EXISTS)
        brand = self.brands.update(brand, payload.name)
        logger.info("Updated brand id=%s", brand.id)
        return brand

    def delete_brand(self, brand_id: int) -> None:
        brand = self.get_brand_by_id(brand_id)
        self.brands.delete(brand)
        logger.info("Deleted brand id=%s with its models and cars", brand_id)
