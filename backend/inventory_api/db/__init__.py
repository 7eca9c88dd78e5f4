from inventory_api.db.base import Base
from inventory_api.db.session import build_engine, build_session_factory, get_db

__all__ = ["Base", "build_engine", "build_session_factory", "get_db"]
