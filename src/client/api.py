"""HTTP client for the Todo API."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


class APIError(Exception):
    """The API answered with ``success: false``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class TodoAPIClient:
    """Thin wrapper around the REST endpoints.

    Pass ``client`` to reuse an existing ``httpx.Client`` (for example a
    FastAPI ``TestClient``); otherwise one is created for ``base_url``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_client = client is None
        self.client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def __enter__(self) -> "TodoAPIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling {method} {path}: {e}")
            raise

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.is_error or not payload.get("success", False):
            message = payload.get("error") or response.reason_phrase
            raise APIError(response.status_code, message)
        return payload

    # Todos

    def get_todos(
        self,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
        completed: bool | None = None,
        category_id: int | None = None,
        priority: str | None = None,
    ) -> dict[str, Any]:
        """Fetch a page of todos. Returns ``{"data": [...], "pagination": {...}}``."""
        params = {
            "page": page,
            "limit": limit,
            "search": search or None,
            "completed": completed,
            "category_id": category_id,
            "priority": priority,
        }
        params = {key: value for key, value in params.items() if value is not None}
        return self._request("GET", "/api/todos", params=params)

    def get_todo(self, todo_id: int) -> dict[str, Any]:
        return self._request("GET", f"/api/todos/{todo_id}")["data"]

    def create_todo(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/api/todos", json=data)["data"]

    def update_todo(self, todo_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/api/todos/{todo_id}", json=data)["data"]

    def toggle_todo(self, todo_id: int) -> dict[str, Any]:
        return self._request("PATCH", f"/api/todos/{todo_id}/toggle")["data"]

    def delete_todo(self, todo_id: int) -> None:
        self._request("DELETE", f"/api/todos/{todo_id}")

    # Categories

    def get_categories(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/categories")["data"]

    def create_category(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/api/categories", json=data)["data"]

    def update_category(self, category_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/api/categories/{category_id}", json=data)["data"]

    def delete_category(self, category_id: int) -> None:
        self._request("DELETE", f"/api/categories/{category_id}")
