import pytest
from sqlalchemy import func, select

from inventory_api.core.errors import ConflictError, ValidationError
from inventory_api.db.init_db import DEMO_CATALOG, init_db
from inventory_api.db.session import build_engine, build_session_factory
from inventory_api.models import Brand, Car
from inventory_api.repositories import BrandRepository, CarRepository, VehicleModelRepository
from inventory_api.schemas.filters import CarFilters


@pytest.fixture()
def db(engine):
    with build_session_factory(engine)() as session:
        yield session


def test_unique_violation_maps_to_conflict(db) -> None:
    brands = BrandRepository(db)
    brands.save("Fiat")

    with pytest.raises(ConflictError):
        brands.save("Fiat")

    assert brands.count() == 1


def test_foreign_key_violation_maps_to_validation_error(db) -> None:
    with pytest.raises(ValidationError):
        VehicleModelRepository(db).save(name="Uno", brand_id=999, fipe_value=1000)


def test_car_count_matches_filtered_rows(db) -> None:
    brand = BrandRepository(db).save("Fiat")
    model = VehicleModelRepository(db).save(name="Uno", brand_id=brand.id, fipe_value=1000)
    cars = CarRepository(db)
    for year in (2018, 2019, 2020):
        cars.save({"color": "Azul", "year": year, "number_of_ports": 4, "fuel": "Flex", "value": 1000, "model_id": model.id})

    filters = CarFilters(year_gte=2019, limit=1)

    assert cars.count(filters) == 2
    assert [car.year for car in cars.find_with_filters(filters)] == [2019]


def test_init_db_creates_tables_and_seeds_once() -> None:
    engine = build_engine("sqlite://")
    session_factory = build_session_factory(engine)

    init_db(engine, session_factory, create_tables=True, seed=True)
    init_db(engine, session_factory, create_tables=True, seed=True)

    with session_factory() as db:
        assert db.scalar(select(func.count()).select_from(Brand)) == len(DEMO_CATALOG)
        assert db.scalar(select(func.count()).select_from(Car)) == 5
    engine.dispose()
