import os
from dataclasses import dataclass


def _env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise RuntimeError(f"Missing required env var: {name}")
    return value


def _env_flag(name: str, default: str = "false") -> bool:
    return _env(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    app_env: str
    api_host: str
    api_port: int
    database_url: str
    frontend_url: str
    log_level: str
    db_auto_create: bool
    seed_demo_data: bool

    @property
    def is_test(self) -> bool:
        return self.app_env == "test"


def build_database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit and explicit.strip():
        return explicit.strip()

    postgres_user = _env("POSTGRES_USER", "inventory_user")
    postgres_password = _env("POSTGRES_PASSWORD", "inventory_pass")
    postgres_host = _env("POSTGRES_HOST", "db")
    postgres_port = _env("POSTGRES_PORT", "5432")
    postgres_db = _env("POSTGRES_DB", "vehicle_inventory")
    return f"postgresql+psycopg2://{postgres_user}:{postgres_password}@{postgres_host}:{postgres_port}/{postgres_db}"


def load_settings() -> Settings:
    return Settings(
        app_env=_env("APP_ENV", os.getenv("NODE_ENV", "development")).strip().lower(),
        api_host=_env("API_HOST", "0.0.0.0"),
        api_port=int(_env("API_PORT", "3333")),
        database_url=build_database_url(),
        frontend_url=_env("FRONTEND_URL", "http://localhost:8080"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        db_auto_create=_env_flag("DB_AUTO_CREATE"),
        seed_demo_data=_env_flag("SEED_DEMO_DATA"),
    )


SETTINGS = load_settings()
