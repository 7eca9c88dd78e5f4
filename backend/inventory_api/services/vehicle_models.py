import logging

from inventory_api.core.errors import ConflictError, NotFoundError, ValidationError
from inventory_api.models import VehicleModel
from inventory_api.repositories import BrandRepository, VehicleModelRepository
from inventory_api.schemas.common import PaginationOut
from inventory_api.schemas.filters import VehicleModelFilters
from inventory_api.schemas.vehicle_model import VehicleModelIn

logger = logging.getLogger(__name__)

MODEL_NOT_FOUND = "Model not found"
MODEL_EXISTS = "A model with this name already exists"
BRAND_MISSING = "Referenced brand does not exist"


class VehicleModelService:
    def __init__(self, models: VehicleModelRepository, brands: BrandRepository) -> None:
        self.models = models
        self.brands = brands

    def _ensure_brand(self, brand_id: int) -> None:
        if self.brands.find_by_id(brand_id) is None:
            raise ValidationError(BRAND_MISSING)

    def create_model(self, payload: VehicleModelIn) -> VehicleModel:
        if self.models.find_by_name(payload.name) is not None:
            raise ConflictError(MODEL_EXISTS)
        self._ensure_brand(payload.brand_id)
        model = self.models.save(name=payload.name, brand_id=payload.brand_id, fipe_value=payload.fipe_value)
        logger.info("Created model id=%s brand_id=%s", model.id, model.brand_id)
        return model

    def get_all_models(self, filters: VehicleModelFilters) -> tuple[list[VehicleModel], PaginationOut]:
        total = self.models.count(filters)
        models = self.models.find_page(filters)
        return models, PaginationOut.build(page=filters.page, limit=filters.limit, total=total)

    def get_model_by_id(self, model_id: int) -> VehicleModel:
        model = self.models.find_by_id(model_id)
        if model is None:
            raise NotFoundError(MODEL_NOT_FOUND)
        return model

    def update_model(self, model_id: int, payload: VehicleModelIn) -> VehicleModel:
        model = self.get_model_by_id(model_id)
        holder = self.models.find_by_name(payload.name)
        if holder is not None and holder.id != model.id:
            raise ConflictError(MODEL_EXISTS)
        self._ensure_brand(payload.brand_id)
        model = self.models.update(
            model,
            name=payload.name,
            brand_id=payload.brand_id,
            fipe_value=payload.fipe_value,
        )
        logger.info("Updated model id=%s", model.id)
        return model

    def delete_model(self, model_id: int) -> None:
        model = self.get_model_by_id(model_id)
        self.models.delete(model)
        logger.info("Deleted model id=%s with its cars", model_id)
