import logging
import time
from typing import Any

import requests

from inventory_client.config import ClientSettings, load_client_settings

logger = logging.getLogger(__name__)

RETRYABLE_METHODS = {"GET"}


class ApiError(Exception):
    def __init__(self, status_code: int, message: str, error: Any = None) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.error = error


def _drop_empty(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None and value != ""}


class ApiClient:
    """Thin wrapper over a requests-compatible session that unwraps the API envelope.

    Any object exposing ``request(method, url, json=..., params=..., timeout=...)``
    works as ``session``, so a FastAPI ``TestClient`` can stand in for the network.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        session: Any = None,
        settings: ClientSettings | None = None,
    ) -> None:
        self.settings = settings or load_client_settings()
        self.base_url = (base_url or self.settings.api_url).rstrip("/")
        self.session = session if session is not None else requests.Session()

    def _send(self, method: str, url: str, **kwargs: Any):
        attempts = max(self.settings.max_retries, 0) + 1 if method in RETRYABLE_METHODS else 1
        if self.settings.timeout_seconds > 0:
            kwargs["timeout"] = self.settings.timeout_seconds
        for attempt in range(1, attempts + 1):
            try:
                return self.session.request(method, url, **kwargs)
            except (requests.ConnectionError, requests.Timeout) as exc:
                if attempt >= attempts:
                    logger.error("%s %s failed after %s attempt(s): %s", method, url, attempt, exc)
                    raise ApiError(0, f"Request failed: {exc}") from exc
                sleep_seconds = self.settings.backoff_seconds * (2 ** (attempt - 1))
                logger.warning("%s %s failed (attempt %s), retrying in %.1fs", method, url, attempt, sleep_seconds)
                time.sleep(sleep_seconds)
            except requests.RequestException as exc:
                logger.error("%s %s failed: %s", method, url, exc)
                raise ApiError(0, f"Request failed: {exc}") from exc
        raise ApiError(0, "Request failed")

    def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        response = self._send(method, url, json=json, params=_drop_empty(params))

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            body = payload if isinstance(payload, dict) else {}
            message = body.get("message") or f"HTTP {response.status_code}"
            logger.info("%s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(response.status_code, message, body.get("error"))

        if not isinstance(payload, dict):
            raise ApiError(response.status_code, "Response is not a JSON object")
        return payload

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: dict[str, Any]) -> dict[str, Any]:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: dict[str, Any]) -> dict[str, Any]:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> dict[str, Any]:
        return self.request("DELETE", path)
