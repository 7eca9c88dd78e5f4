import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ClientSettings:
    api_url: str
    timeout_seconds: float
    max_retries: int
    backoff_seconds: float


def load_client_settings() -> ClientSettings:
    return ClientSettings(
        api_url=os.getenv("INVENTORY_API_URL", "http://localhost:3333/api").rstrip("/"),
        timeout_seconds=float(os.getenv("INVENTORY_API_TIMEOUT_SECONDS", "10")),
        max_retries=int(os.getenv("INVENTORY_API_MAX_RETRIES", "3")),
        backoff_seconds=float(os.getenv("INVENTORY_API_BACKOFF_SECONDS", "0.5")),
    )
