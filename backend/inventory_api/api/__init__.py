from inventory_api.api.brands import router as brands_router
from inventory_api.api.cars import router as cars_router
from inventory_api.api.models import router as models_router

__all__ = ["brands_router", "cars_router", "models_router"]
