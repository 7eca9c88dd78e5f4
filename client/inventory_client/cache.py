import copy
import logging
from typing import Any

from pydantic import BaseModel

from inventory_client.client import ApiError
from inventory_client.services import Page, ResourceService, to_payload

logger = logging.getLogger(__name__)

PENDING_KEY = "_pending"


def _query_key(filters: dict[str, Any]) -> tuple:
    return tuple(sorted((key, value) for key, value in filters.items() if value is not None))


class ResourceCache:
    """List cache for one resource with optimistic mutations.

    Mutations patch every cached list before the request is sent and restore the
    previous lists when the request fails. A created item only lands in cached
    lists as a placeholder until the server answers; its position and filter
    match are not recomputed, call ``invalidate`` to refetch.
    """

    def __init__(self, service: ResourceService) -> None:
        self.service = service
        self._lists: dict[tuple, Page] = {}

    def list(self, *, refresh: bool = False, **filters: Any) -> Page:
        key = _query_key(filters)
        if refresh or key not in self._lists:
            self._lists[key] = self.service.list(**filters)
        return self._lists[key]

    def cached(self, **filters: Any) -> Page | None:
        return self._lists.get(_query_key(filters))

    def invalidate(self) -> None:
        self._lists.clear()

    def _snapshot(self) -> dict[tuple, Page]:
        return copy.deepcopy(self._lists)

    def _restore(self, snapshot: dict[tuple, Page], exc: ApiError) -> None:
        logger.info("Rolling back optimistic %s update: %s", self.service.path, exc.message)
        self._lists = snapshot

    def create(self, data: BaseModel | dict[str, Any]) -> dict[str, Any]:
        snapshot = self._snapshot()
        placeholder = {**to_payload(data), "id": None, PENDING_KEY: True}
        for page in self._lists.values():
            page.items.append(placeholder)
        try:
            created = self.service.create(data)
        except ApiError as exc:
            self._restore(snapshot, exc)
            raise
        for page in self._lists.values():
            page.items = [created if item is placeholder else item for item in page.items]
            if page.pagination:
                page.pagination["total"] = page.pagination.get("total", 0) + 1
        return created

    def update(self, item_id: int, data: BaseModel | dict[str, Any]) -> dict[str, Any]:
        snapshot = self._snapshot()
        patch = to_payload(data)
        for page in self._lists.values():
            page.items = [{**item, **patch, PENDING_KEY: True} if item.get("id") == item_id else item for item in page.items]
        try:
            updated = self.service.update(item_id, data)
        except ApiError as exc:
            self._restore(snapshot, exc)
            raise
        for page in self._lists.values():
            page.items = [updated if item.get("id") == item_id else item for item in page.items]
        return updated

    def delete(self, item_id: int) -> None:
        snapshot = self._snapshot()
        for page in self._lists.values():
            before = len(page.items)
            page.items = [item for item in page.items if item.get("id") != item_id]
            if page.pagination and len(page.items) != before:
                page.pagination["total"] = max(page.pagination.get("total", 1) - 1, 0)
        try:
            self.service.delete(item_id)
        except ApiError as exc:
            self._restore(snapshot, exc)
            raise
