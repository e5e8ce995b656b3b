"""Content store session management.

Wraps a `requests.Session` configured with the store's bearer credential.
Every call is a single request/response: no retries, no caching.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Generator

import requests

from awardops.config import StoreConfig

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when the content store is unreachable or rejects a request.

    Attributes:
        status_code: HTTP status of the failed response, None when no
            response was received.
        body: Response body text (or the transport error message).
    """

    def __init__(self, status_code: int | None, body: str, *, path: str = ""):
        self.status_code = status_code
        self.body = body
        self.path = path
        if status_code is None:
            message = f"Content store request failed: {body}"
        else:
            message = f"Content store request failed ({status_code}): {body}"
        super().__init__(message)


class StoreSession:
    """HTTP session against the content store's item collections."""

    def __init__(self, config: StoreConfig, http: requests.Session | None = None):
        """Initialize store session.

        Args:
            config: Validated store configuration.
            http: Optional pre-built requests session (used by tests).
        """
        self.config = config
        self.http = http if http is not None else requests.Session()
        self.http.headers.update(
            {
                "Authorization": f"Bearer {config.credential}",
                "Content-Type": "application/json",
            }
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Issue a request and return the decoded JSON body.

        Raises:
            StoreError: On transport failure or any non-2xx response.
        """
        response = self._send(method, path, **kwargs)
        if not response.content:
            return None
        return response.json()

    def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.config.endpoint}/{path}"
        logger.debug(f"Store request: {method} {path}")

        try:
            response = self.http.request(method, url, timeout=self.config.timeout, **kwargs)
        except requests.RequestException as e:
            raise StoreError(None, str(e), path=path) from e

        if not response.ok:
            message = response.text or response.reason or ""
            raise StoreError(response.status_code, message, path=path)
        return response

    def list_items(self, collection: str, params: dict[str, str]) -> list[dict]:
        """Read items from a collection.

        Args:
            collection: Collection name, e.g. "awards".
            params: Query parameters (fields, sort, limit, filters).

        Returns:
            List of raw item dicts; empty when the store returns no data.
        """
        payload = self._request("GET", f"items/{collection}", params=params)
        if not payload:
            return []
        return payload.get("data") or []

    def _write(self, method: str, path: str, data: dict[str, Any]) -> dict:
        """Send a write and return the stored record from the response.

        Raises:
            StoreError: If the write fails or the store does not echo the
                record back (e.g. 204 when the token cannot read the item).
        """
        response = self._send(method, path, json=data)
        payload = response.json() if response.content else None
        record = payload.get("data") if isinstance(payload, dict) else None
        if not record:
            raise StoreError(response.status_code, "empty response", path=path)
        return record

    def create_item(self, collection: str, data: dict[str, Any]) -> dict:
        """Create an item and return the stored record."""
        return self._write("POST", f"items/{collection}", data)

    def update_item(self, collection: str, item_id: int, data: dict[str, Any]) -> dict:
        """Partially update an item by id and return the stored record."""
        return self._write("PATCH", f"items/{collection}/{item_id}", data)

    def close(self) -> None:
        """Release pooled connections."""
        self.http.close()


@contextmanager
def open_session(config: StoreConfig) -> Generator[StoreSession, None, None]:
    """Context manager for store sessions with automatic cleanup.

    Example:
        with open_session(StoreConfig.from_env()) as session:
            awards = repo.list_awards(session)
    """
    session = StoreSession(config)
    try:
        yield session
    finally:
        session.close()
