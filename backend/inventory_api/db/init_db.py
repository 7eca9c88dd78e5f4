import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from inventory_api.db.base import Base
from inventory_api.models import Brand, Car, VehicleModel

logger = logging.getLogger(__name__)

DEMO_CATALOG = [
    {
        "brand": "Toyota",
        "models": [
            {
                "name": "Corolla",
                "fipe_value": 120000,
                "cars": [
                    {"color": "Prata", "year": 2021, "number_of_ports": 4, "fuel": "Flex", "value": 115000},
                    {"color": "Branco", "year": 2019, "number_of_ports": 4, "fuel": "Gasolina", "value": 98000},
                ],
            },
            {
                "name": "Hilux",
                "fipe_value": 250000,
                "cars": [
                    {"color": "Preto", "year": 2022, "number_of_ports": 4, "fuel": "Diesel", "value": 245000},
                ],
            },
        ],
    },
    {
        "brand": "Volkswagen",
        "models": [
            {
                "name": "Gol",
                "fipe_value": 45000,
                "cars": [
                    {"color": "Vermelho", "year": 2018, "number_of_ports": 2, "fuel": "Etanol", "value": 38000},
                    {"color": "Azul", "year": 2020, "number_of_ports": 4, "fuel": "Flex", "value": 47000},
                ],
            },
        ],
    },
]


def seed_data(db: Session) -> None:
    has_brands = db.scalar(select(Brand.id).limit(1))
    if has_brands is not None:
        return

    for entry in DEMO_CATALOG:
        brand = Brand(name=entry["brand"])
        for model_entry in entry["models"]:
            model = VehicleModel(name=model_entry["name"], fipe_value=model_entry["fipe_value"])
            model.cars = [Car(**car) for car in model_entry["cars"]]
            brand.models.append(model)
        db.add(brand)
    db.commit()
    logger.info("Seeded demo catalog with %s brands", len(DEMO_CATALOG))


def init_db(engine: Engine, session_factory: sessionmaker[Session], *, create_tables: bool, seed: bool) -> None:
    if create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
    if seed:
        with session_factory() as db:
            seed_data(db)
